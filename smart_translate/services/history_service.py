"""
/**
 * @file smart_translate/services/history_service.py
 * @description 客户端本地翻译历史与离线缓存，以及在线/离线翻译流程。
 */
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Dict, List, Optional

from smart_translate.models.history_models import HistoryEntry
from smart_translate.models.translation_result_model import (
    TranslationError,
    TranslationOutcome,
    TranslationResult,
)
from smart_translate.services.llm_client_service import LanguageModelClient
from smart_translate.services.smart_translate_service import get_translation
from smart_translate.utils.storage_utils import KeyValueStore


logger = logging.getLogger("smart_translate")

HISTORY_KEY = "translationHistory"
CACHE_KEY = "offlineCache"
HISTORY_LIMIT = 50

CACHE_MISS_MESSAGE = "This translation is not available in your offline cache."


def _now_id() -> str:
    return f"{datetime.datetime.now(datetime.timezone.utc).isoformat()}-{uuid.uuid4().hex[:8]}"


class HistoryStore:
    """Bounded translation history, newest first."""

    def __init__(self, store: KeyValueStore, limit: int = HISTORY_LIMIT) -> None:
        self._store = store
        self.limit = limit

    def list(self) -> List[HistoryEntry]:
        raw = self._store.get(HISTORY_KEY, [])
        entries: List[HistoryEntry] = []
        for item in raw if isinstance(raw, list) else []:
            try:
                entries.append(HistoryEntry.model_validate(item))
            except ValueError:
                logger.warning(f"Skipping malformed history entry: {item!r}")
        return entries

    def add(self, source_lang: str, target_lang: str, source_text: str, translated_text: str) -> HistoryEntry:
        entry = HistoryEntry(
            id=_now_id(),
            sourceLang=source_lang,
            targetLang=target_lang,
            sourceText=source_text,
            translatedText=translated_text,
        )
        entries = [entry] + self.list()[: self.limit - 1]
        self._store.set(HISTORY_KEY, [e.to_dict() for e in entries])
        return entry

    def clear(self) -> None:
        self._store.delete(HISTORY_KEY)


class OfflineCache:
    """Translations keyed by ``source-target:text``.

    Language codes are lower-cased and the text is stripped at both ends; inner
    whitespace and letter case of the text are kept as typed.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @staticmethod
    def key(source_lang: str, target_lang: str, text: str) -> str:
        return f"{source_lang.strip().lower()}-{target_lang.strip().lower()}:{text.strip()}"

    def _entries(self) -> Dict[str, str]:
        raw = self._store.get(CACHE_KEY, {})
        return raw if isinstance(raw, dict) else {}

    def get(self, source_lang: str, target_lang: str, text: str) -> Optional[str]:
        value = self._entries().get(self.key(source_lang, target_lang, text))
        return value if isinstance(value, str) else None

    def put(self, source_lang: str, target_lang: str, text: str, translation: str) -> None:
        entries = self._entries()
        entries[self.key(source_lang, target_lang, text)] = translation
        self._store.set(CACHE_KEY, entries)

    def __len__(self) -> int:
        return len(self._entries())


class TranslateSession:
    """Client workflow: translate online and remember, or answer from the cache offline."""

    def __init__(
        self,
        store: KeyValueStore,
        client: Optional[LanguageModelClient] = None,
        history_limit: int = HISTORY_LIMIT,
    ) -> None:
        self.history = HistoryStore(store, limit=history_limit)
        self.cache = OfflineCache(store)
        self._client = client

    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str = "auto",
        offline: bool = False,
    ) -> TranslationOutcome:
        if offline:
            cached = self.cache.get(source_lang, target_lang, text)
            if cached is None:
                return TranslationError(error=CACHE_MISS_MESSAGE)
            return TranslationResult(translation=cached, detectedLanguage=source_lang, confidence=1.0)

        outcome = get_translation(text, target_lang, source_lang, client=self._client)
        if isinstance(outcome, TranslationResult):
            self.history.add(source_lang, target_lang, text, outcome.translation)
            self.cache.put(source_lang, target_lang, text, outcome.translation)
        return outcome
