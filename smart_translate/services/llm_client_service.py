"""
/**
 * @file smart_translate/services/llm_client_service.py
 * @description 大模型调用封装：语言检测与 HTML 翻译两类结构化提示词。
 */
"""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from smart_translate.config import Settings, load_settings


logger = logging.getLogger("llm_client")

DETECTION_PROMPT = (
    "You are an expert in language detection. Analyze the following text and determine "
    "its language and your confidence level.\n\n"
    "Text: {text}\n\n"
    "Respond with a JSON object that includes the detected language and a confidence "
    "score between 0 and 1.\n"
    'Output Format (Strict JSON): {{"language": "<language code>", "confidence": <number>}}'
)

TRANSLATION_PROMPT = (
    "You are an expert translator. Translate the text content within the following HTML "
    "to {target_language}. It is crucial that you preserve all HTML tags, attributes, and "
    "the overall structure of the document. Only translate the human-readable text content "
    "found between the tags.\n\n"
    "HTML: {text}\n\n"
    'Output Format (Strict JSON): {{"translation": "<translated HTML>"}}'
)

_FENCED_JSON_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
_FENCED_RE = re.compile(r"```\s*(.*?)\s*```", re.DOTALL)


def parse_json_content(content: Any) -> Optional[Dict[str, Any]]:
    """Parse a JSON object out of model output that may be wrapped in markdown fences."""
    if not isinstance(content, str):
        return None
    json_str = content.strip()
    match = _FENCED_JSON_RE.search(json_str) or _FENCED_RE.search(json_str)
    if match:
        json_str = match.group(1)
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError:
        logger.warning(f"Model output is not valid JSON: {json_str[:200]}")
        return None
    return data if isinstance(data, dict) else None


class LanguageModelClient(ABC):
    """One method per structured prompt; ``None`` means the model gave no usable result."""

    @abstractmethod
    def detect_language(self, text: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def translate_markup(self, text: str, target_language: str) -> Optional[Dict[str, Any]]:
        ...


class ChatCompletionClient(LanguageModelClient):
    """OpenAI-compatible chat completions client (DashScope compatible mode by default)."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        # settings are fetched dynamically unless pinned here
        self._initial_settings = settings
        self._session = session

    @property
    def settings(self) -> Settings:
        return self._initial_settings or load_settings()

    @property
    def api_key(self) -> Optional[str]:
        return self.settings.resolve_llm_key()

    def _get_headers(self) -> Dict[str, str]:
        key = self.api_key
        if not key:
            raise ValueError("Missing API key. Set SMART_TRANSLATE_API_KEY or config.local.json")
        return {"Authorization": f"Bearer {key}", "Content-Type": "application/json"}

    def _post(self, url: str, **kwargs) -> requests.Response:
        if self._session is not None:
            return self._session.post(url, **kwargs)
        return requests.post(url, **kwargs)

    def call_chat(self, prompt: str, model: Optional[str] = None) -> Dict[str, Any]:
        settings = self.settings
        payload = {
            "model": model or settings.llm_model,
            "messages": [{"role": "user", "content": prompt}],
            "response_format": {"type": "json_object"},
        }
        try:
            response = self._post(
                settings.llm_endpoint,
                headers=self._get_headers(),
                json=payload,
                timeout=settings.llm_timeout_s,
            )
            if response.status_code == 200:
                data = response.json()
                content = data["choices"][0]["message"]["content"]
                return {"status": "success", "output": content}
            return {"status": "error", "code": response.status_code, "message": response.text}
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
            return {"status": "error", "message": str(e)}

    def _structured_call(self, prompt: str, purpose: str) -> Optional[Dict[str, Any]]:
        result = self.call_chat(prompt)
        if result.get("status") != "success":
            logger.error(f"[{purpose}] model call failed: {result.get('code', '')} {result.get('message', '')}".strip())
            return None
        return parse_json_content(result.get("output"))

    def detect_language(self, text: str) -> Optional[Dict[str, Any]]:
        return self._structured_call(DETECTION_PROMPT.format(text=text), "detect")

    def translate_markup(self, text: str, target_language: str) -> Optional[Dict[str, Any]]:
        prompt = TRANSLATION_PROMPT.format(text=text, target_language=target_language)
        return self._structured_call(prompt, "translate")
