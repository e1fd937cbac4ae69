"""
/**
 * @file smart_translate/models/history_models.py
 * @description 本地翻译历史记录模型。
 */
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel


class HistoryEntry(BaseModel):
    id: str
    sourceLang: str
    targetLang: str
    sourceText: str
    translatedText: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
