"""
/**
 * @file smart_translate/services/errors.py
 * @description 翻译流程异常定义。
 */
"""


class SmartTranslateError(Exception):
    """Base class for failures of a remote language model call."""


class DetectionFailure(SmartTranslateError):
    """The model returned no usable language detection result."""


class TranslationFailure(SmartTranslateError):
    """The model returned no usable translation for a confidently detected text."""
