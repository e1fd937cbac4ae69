"""
/**
 * @file smart_translate/utils/__init__.py
 * @description 工具函数导出。
 */
"""

from .languages import AUTO_DETECT, LANGUAGES, language_name, target_languages
from .markup_utils import extract_tags, has_markup, preserves_markup, text_nodes
from .storage_utils import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore

__all__ = [
    "AUTO_DETECT",
    "LANGUAGES",
    "language_name",
    "target_languages",
    "extract_tags",
    "has_markup",
    "preserves_markup",
    "text_nodes",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
