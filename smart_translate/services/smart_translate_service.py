"""
/**
 * @file smart_translate/services/smart_translate_service.py
 * @description 智能翻译编排：先检测语言，置信度达到阈值才翻译，否则返回固定提示。
 */
"""

from __future__ import annotations

import logging
from typing import Optional

from smart_translate.config import load_settings
from smart_translate.models.translation_result_model import (
    LowConfidenceFallback,
    SmartTranslateOutcome,
    TranslationError,
    TranslationOutcome,
    TranslationResult,
)
from smart_translate.services.detection_service import detect
from smart_translate.services.llm_client_service import ChatCompletionClient, LanguageModelClient
from smart_translate.services.translation_service import translate


logger = logging.getLogger("smart_translate")

CONFIDENCE_THRESHOLD = 0.7
LOW_CONFIDENCE_MESSAGE = "Language detection confidence is too low to translate."


def resolve_threshold(threshold: Optional[float] = None) -> float:
    if threshold is not None:
        return threshold
    configured = load_settings().confidence_threshold
    return CONFIDENCE_THRESHOLD if configured is None else configured


def run(
    text: str,
    target_language: str,
    client: Optional[LanguageModelClient] = None,
    threshold: Optional[float] = None,
) -> SmartTranslateOutcome:
    """Detect, gate on confidence, then translate.

    DetectionFailure and TranslationFailure propagate unchanged; the translator is
    never called unless detection succeeded with confidence >= threshold.
    """
    c = client or ChatCompletionClient()
    gate = resolve_threshold(threshold)

    detection = detect(text, client=c)
    if detection.confidence < gate:
        logger.debug(
            f"Detected {detection.language} at {detection.confidence:.2f} < {gate:.2f}; not translating."
        )
        return LowConfidenceFallback(
            message=LOW_CONFIDENCE_MESSAGE,
            detectedLanguage=detection.language,
            confidence=detection.confidence,
        )

    translation = translate(text, target_language, client=c)
    return TranslationResult(
        translation=translation,
        detectedLanguage=detection.language,
        confidence=detection.confidence,
    )


def get_translation(
    text: str,
    target_language: str,
    source_language: str = "auto",
    client: Optional[LanguageModelClient] = None,
) -> TranslationOutcome:
    """In-process entry point: the three outcomes as values, never an exception.

    ``source_language`` is accepted for callers that track it; detection always runs.
    """
    try:
        return run(text, target_language, client=client)
    except Exception as e:
        logger.exception(f"Translation from {source_language} to {target_language} failed")
        return TranslationError(error=f"Failed to get translation: {e}")
