"""
/**
 * @file smart_translate/models/translation_result_model.py
 * @description 语言检测与翻译结果模型。
 */
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class DetectionResult:
    language: str
    confidence: float


@dataclass(frozen=True)
class TranslationResult:
    translation: str
    detectedLanguage: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LowConfidenceFallback:
    """Returned instead of a translation when detection is not confident enough."""

    message: str
    detectedLanguage: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TranslationError:
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


SmartTranslateOutcome = Union[TranslationResult, LowConfidenceFallback]
TranslationOutcome = Union[TranslationResult, LowConfidenceFallback, TranslationError]
