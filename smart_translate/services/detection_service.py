"""
/**
 * @file smart_translate/services/detection_service.py
 * @description 语言检测服务。
 */
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from smart_translate.models.translation_result_model import DetectionResult
from smart_translate.services.errors import DetectionFailure
from smart_translate.services.llm_client_service import ChatCompletionClient, LanguageModelClient


logger = logging.getLogger("smart_translate")

DETECTION_FAILED_MESSAGE = "Could not detect language."


def _as_confidence(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if math.isnan(value) or value < 0 or value > 1:
        return None
    return value


def detect(text: str, client: Optional[LanguageModelClient] = None) -> DetectionResult:
    c = client or ChatCompletionClient()
    output = c.detect_language(text)
    if not isinstance(output, dict):
        raise DetectionFailure(DETECTION_FAILED_MESSAGE)

    language = output.get("language")
    confidence = _as_confidence(output.get("confidence"))
    if not isinstance(language, str) or not language.strip() or confidence is None:
        logger.warning(f"Malformed detection result: {output!r}")
        raise DetectionFailure(DETECTION_FAILED_MESSAGE)

    return DetectionResult(language=language, confidence=confidence)
