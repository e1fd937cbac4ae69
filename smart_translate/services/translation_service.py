"""
/**
 * @file smart_translate/services/translation_service.py
 * @description 翻译服务：仅翻译 HTML 中的文本内容，保留标签结构。
 */
"""

from __future__ import annotations

import logging
from typing import Optional

from smart_translate.config import load_settings
from smart_translate.services.errors import TranslationFailure
from smart_translate.services.llm_client_service import ChatCompletionClient, LanguageModelClient
from smart_translate.utils.markup_utils import preserves_markup


logger = logging.getLogger("smart_translate")

TRANSLATION_FAILED_MESSAGE = "Could not translate text."
MARKUP_CHANGED_MESSAGE = "Translated markup does not preserve the source structure."


def translate(
    text: str,
    target_language: str,
    client: Optional[LanguageModelClient] = None,
    strict_markup: Optional[bool] = None,
) -> str:
    c = client or ChatCompletionClient()
    output = c.translate_markup(text, target_language)
    translation = output.get("translation") if isinstance(output, dict) else None
    if not isinstance(translation, str) or not translation.strip():
        raise TranslationFailure(TRANSLATION_FAILED_MESSAGE)

    if strict_markup is None:
        strict_markup = load_settings().strict_markup
    if strict_markup and not preserves_markup(text, translation):
        logger.warning(f"Translation to {target_language} altered the markup; rejecting it.")
        raise TranslationFailure(MARKUP_CHANGED_MESSAGE)

    return translation
