"""
/**
 * @file smart_translate/services/__init__.py
 * @description 业务服务层导出。
 */
"""

from .detection_service import detect
from .errors import DetectionFailure, SmartTranslateError, TranslationFailure
from .history_service import HistoryStore, OfflineCache, TranslateSession
from .llm_client_service import ChatCompletionClient, LanguageModelClient
from .smart_translate_service import CONFIDENCE_THRESHOLD, LOW_CONFIDENCE_MESSAGE, get_translation, run
from .translation_service import translate

__all__ = [
    "CONFIDENCE_THRESHOLD",
    "LOW_CONFIDENCE_MESSAGE",
    "ChatCompletionClient",
    "DetectionFailure",
    "HistoryStore",
    "LanguageModelClient",
    "OfflineCache",
    "SmartTranslateError",
    "TranslateSession",
    "TranslationFailure",
    "detect",
    "get_translation",
    "run",
    "translate",
]
