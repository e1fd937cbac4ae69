"""
/**
 * @file smart_translate/models/translate_request_model.py
 * @description 翻译请求模型（Pydantic）。
 */
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from smart_translate.config import load_settings

MIN_TARGET_LANGUAGE_LENGTH = 2


class TranslateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    targetLanguage: str

    @field_validator("text")
    @classmethod
    def _text_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text to translate cannot be empty.")
        return value

    @field_validator("targetLanguage")
    @classmethod
    def _target_language_present(cls, value: str) -> str:
        minimum = load_settings().min_target_language_length or MIN_TARGET_LANGUAGE_LENGTH
        if len(value.strip()) < minimum:
            raise ValueError("Target language code must be provided.")
        return value.strip()
