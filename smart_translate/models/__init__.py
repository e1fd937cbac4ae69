"""
/**
 * @file smart_translate/models/__init__.py
 * @description 数据模型导出。
 */
"""

from .history_models import HistoryEntry
from .translate_request_model import MIN_TARGET_LANGUAGE_LENGTH, TranslateRequest
from .translation_result_model import (
    DetectionResult,
    LowConfidenceFallback,
    SmartTranslateOutcome,
    TranslationError,
    TranslationOutcome,
    TranslationResult,
)

__all__ = [
    "DetectionResult",
    "HistoryEntry",
    "LowConfidenceFallback",
    "MIN_TARGET_LANGUAGE_LENGTH",
    "SmartTranslateOutcome",
    "TranslateRequest",
    "TranslationError",
    "TranslationOutcome",
    "TranslationResult",
]
