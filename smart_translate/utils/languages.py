"""
/**
 * @file smart_translate/utils/languages.py
 * @description 可选语言列表与语言名称查询。
 */
"""

from __future__ import annotations

from typing import Dict, List

AUTO_DETECT = "auto"

LANGUAGES: List[Dict[str, str]] = [
    {"code": AUTO_DETECT, "name": "Auto-detect"},
    {"code": "ar", "name": "Arabic"},
    {"code": "bn", "name": "Bengali"},
    {"code": "zh", "name": "Chinese"},
    {"code": "cs", "name": "Czech"},
    {"code": "da", "name": "Danish"},
    {"code": "nl", "name": "Dutch"},
    {"code": "en", "name": "English"},
    {"code": "fi", "name": "Finnish"},
    {"code": "fr", "name": "French"},
    {"code": "de", "name": "German"},
    {"code": "el", "name": "Greek"},
    {"code": "he", "name": "Hebrew"},
    {"code": "hi", "name": "Hindi"},
    {"code": "hu", "name": "Hungarian"},
    {"code": "id", "name": "Indonesian"},
    {"code": "it", "name": "Italian"},
    {"code": "ja", "name": "Japanese"},
    {"code": "ko", "name": "Korean"},
    {"code": "no", "name": "Norwegian"},
    {"code": "pl", "name": "Polish"},
    {"code": "pt", "name": "Portuguese"},
    {"code": "ro", "name": "Romanian"},
    {"code": "ru", "name": "Russian"},
    {"code": "es", "name": "Spanish"},
    {"code": "sv", "name": "Swedish"},
    {"code": "th", "name": "Thai"},
    {"code": "tr", "name": "Turkish"},
    {"code": "uk", "name": "Ukrainian"},
    {"code": "vi", "name": "Vietnamese"},
]


def language_name(code: str) -> str:
    """Display name for ``code`` (case-insensitive); unknown codes are returned as given."""
    wanted = (code or "").strip().lower()
    for lang in LANGUAGES:
        if lang["code"].lower() == wanted:
            return lang["name"]
    return code


def target_languages() -> List[Dict[str, str]]:
    return [lang for lang in LANGUAGES if lang["code"] != AUTO_DETECT]
