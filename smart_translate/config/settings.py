"""
/**
 * @file smart_translate/config/settings.py
 * @description 配置加载与合并（config.json + config.local.json），支持热加载。
 */
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_DIR = os.getenv("SMART_TRANSLATE_CONFIG_DIR") or PACKAGE_ROOT
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")
CONFIG_LOCAL_PATH = os.path.join(CONFIG_DIR, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(PACKAGE_ROOT, "config.example.json")

DEFAULT_ENDPOINT = "https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions"
DEFAULT_MODEL = "qwen-plus"
DEFAULT_STORE_PATH = os.path.join(os.path.expanduser("~"), ".smart_translate", "store.json")

logger = logging.getLogger("config_loader")


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name, {})
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def llm(self) -> Dict[str, Any]:
        return _section(self.raw, "llm")

    @property
    def api_keys(self) -> Dict[str, str]:
        return _section(self.raw, "api_keys")

    @property
    def translation(self) -> Dict[str, Any]:
        return _section(self.raw, "translation")

    @property
    def client(self) -> Dict[str, Any]:
        return _section(self.raw, "client")

    @property
    def llm_endpoint(self) -> str:
        value = self.llm.get("endpoint")
        return value if isinstance(value, str) and value else DEFAULT_ENDPOINT

    @property
    def llm_model(self) -> str:
        value = self.llm.get("model")
        return value if isinstance(value, str) and value else DEFAULT_MODEL

    @property
    def llm_timeout_s(self) -> float:
        value = self.llm.get("timeout_s")
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
            return float(value)
        return 30.0

    @property
    def confidence_threshold(self) -> Optional[float]:
        value = self.translation.get("confidence_threshold")
        if isinstance(value, (int, float)) and not isinstance(value, bool) and 0 <= value <= 1:
            return float(value)
        return None

    @property
    def strict_markup(self) -> bool:
        return bool(self.translation.get("strict_markup", True))

    @property
    def min_target_language_length(self) -> int:
        value = self.translation.get("min_target_language_length")
        return value if isinstance(value, int) and value > 0 else 2

    @property
    def store_path(self) -> str:
        value = self.client.get("store_path")
        if isinstance(value, str) and value:
            return os.path.expanduser(value)
        return DEFAULT_STORE_PATH

    @property
    def history_limit(self) -> int:
        value = self.client.get("history_limit")
        return value if isinstance(value, int) and value > 0 else 50

    @property
    def log_level(self) -> str:
        value = self.raw.get("log_level")
        return value if isinstance(value, str) and value else "INFO"

    @property
    def cors_origins(self) -> List[str]:
        value = self.raw.get("cors_origins")
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return value
        return ["*"]

    def resolve_llm_key(self) -> Optional[str]:
        return (
            os.getenv("SMART_TRANSLATE_API_KEY")
            or os.getenv("DASHSCOPE_API_KEY")
            or (self.api_keys.get("llm") if isinstance(self.api_keys.get("llm"), str) else None)
        )


_CACHED_SETTINGS: Optional[Settings] = None
_LAST_LOAD_TIME = 0.0
_CONFIG_HASH = ""
_SETTINGS_LOCK = threading.Lock()


def _deep_diff(d1: Dict[str, Any], d2: Dict[str, Any], path="") -> list:
    diffs = []
    for k in sorted(set(d1.keys()) | set(d2.keys())):
        p = f"{path}.{k}" if path else k
        if k not in d1:
            diffs.append(f"Added: {p}")
        elif k not in d2:
            diffs.append(f"Removed: {p}")
        elif isinstance(d1[k], dict) and isinstance(d2[k], dict):
            diffs.extend(_deep_diff(d1[k], d2[k], p))
        elif d1[k] != d2[k]:
            # api keys are never echoed into the log
            if "key" in p.lower():
                diffs.append(f"Changed: {p}")
            else:
                diffs.append(f"Changed: {p} ({d1[k]} -> {d2[k]})")
    return diffs


def read_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    """Read and merge the config files without touching the process-wide cache."""
    base_cfg = _load_json(base_path)
    if not base_cfg.get("llm") and os.path.exists(example_path):
        base_cfg = _merge_dicts(_load_json(example_path), base_cfg)
    local_cfg = _load_json(local_path)
    return Settings(raw=_merge_dicts(base_cfg, local_cfg))


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    global _CACHED_SETTINGS, _LAST_LOAD_TIME, _CONFIG_HASH

    with _SETTINGS_LOCK:
        now = time.time()
        # Debounce: 500ms
        if _CACHED_SETTINGS and (now - _LAST_LOAD_TIME < 0.5):
            return _CACHED_SETTINGS

        try:
            merged = read_settings(base_path, local_path, example_path).raw

            # Sort keys to ensure consistent hash for same content
            new_hash = hashlib.md5(json.dumps(merged, sort_keys=True).encode("utf-8")).hexdigest()

            if _CACHED_SETTINGS and new_hash == _CONFIG_HASH:
                _LAST_LOAD_TIME = now
                return _CACHED_SETTINGS

            is_reload = _CACHED_SETTINGS is not None
            if is_reload:
                diffs = _deep_diff(_CACHED_SETTINGS.raw, merged)
                if diffs:
                    logger.info("Config changes detected: %s", "; ".join(diffs))

            _CACHED_SETTINGS = Settings(raw=merged)
            _CONFIG_HASH = new_hash
            _LAST_LOAD_TIME = now

            if is_reload:
                logger.info("Configuration reloaded successfully.")

        except (OSError, ValueError) as e:
            logger.error("Failed to reload config: %s. Keeping old config.", e)
            if not _CACHED_SETTINGS:
                logger.warning("Initializing with empty settings due to load failure.")
                _CACHED_SETTINGS = Settings(raw={})

    return _CACHED_SETTINGS


def load_settings() -> Settings:
    """
    Get current settings. Lazy loads on first call.
    Subsequent reloads are handled by the file watcher calling reload_settings().
    """
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS
