"""
/**
 * @file smart_translate/tests/test_settings_merge.py
 * @description 配置合并单元测试。
 */
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from smart_translate.config.settings import DEFAULT_ENDPOINT, Settings, read_settings


class TestSettingsMerge(unittest.TestCase):
    def test_merge_base_and_local(self):
        with tempfile.TemporaryDirectory() as tmp:
            base_path = os.path.join(tmp, "config.json")
            local_path = os.path.join(tmp, "config.local.json")
            example_path = os.path.join(tmp, "config.example.json")

            with open(base_path, "w") as f:
                json.dump({"api_keys": {"llm": "a"}, "llm": {"model": "m1", "endpoint": "x"}}, f)
            with open(local_path, "w") as f:
                json.dump({"api_keys": {"llm": "b"}, "translation": {"confidence_threshold": 0.8}}, f)
            with open(example_path, "w") as f:
                json.dump({}, f)

            s = read_settings(base_path=base_path, local_path=local_path, example_path=example_path)
            self.assertEqual(s.api_keys.get("llm"), "b")
            self.assertEqual(s.llm_model, "m1")
            self.assertEqual(s.llm_endpoint, "x")
            self.assertEqual(s.confidence_threshold, 0.8)

    def test_example_fills_missing_base(self):
        with tempfile.TemporaryDirectory() as tmp:
            example_path = os.path.join(tmp, "config.example.json")
            with open(example_path, "w") as f:
                json.dump({"llm": {"model": "from-example"}, "log_level": "DEBUG"}, f)

            s = read_settings(
                base_path=os.path.join(tmp, "missing.json"),
                local_path=os.path.join(tmp, "missing.local.json"),
                example_path=example_path,
            )
            self.assertEqual(s.llm_model, "from-example")
            self.assertEqual(s.log_level, "DEBUG")

    def test_defaults(self):
        s = Settings(raw={})
        self.assertEqual(s.llm_endpoint, DEFAULT_ENDPOINT)
        self.assertEqual(s.llm_timeout_s, 30.0)
        self.assertIsNone(s.confidence_threshold)
        self.assertTrue(s.strict_markup)
        self.assertEqual(s.min_target_language_length, 2)
        self.assertEqual(s.history_limit, 50)
        self.assertEqual(s.cors_origins, ["*"])

    def test_invalid_threshold_ignored(self):
        for value in (1.5, -0.1, "0.7", True):
            with self.subTest(value=value):
                self.assertIsNone(Settings(raw={"translation": {"confidence_threshold": value}}).confidence_threshold)

    @patch.dict("os.environ", {"SMART_TRANSLATE_API_KEY": "env-key"})
    def test_env_key_wins(self):
        s = Settings(raw={"api_keys": {"llm": "file-key"}})
        self.assertEqual(s.resolve_llm_key(), "env-key")


if __name__ == "__main__":
    unittest.main()
