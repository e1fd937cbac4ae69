"""
/**
 * @file smart_translate/tests/test_translate_cli.py
 * @description 命令行客户端单元测试。
 */
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from smart_translate.config.settings import Settings
from smart_translate.scripts.translate_cli import EXIT_ERROR, EXIT_LOW_CONFIDENCE, EXIT_OK, main
from smart_translate.tests.fake_llm_client import FakeLanguageModelClient


@patch("smart_translate.services.smart_translate_service.load_settings", lambda: Settings(raw={}))
class TestTranslateCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = os.path.join(self._tmp.name, "store.json")

    def tearDown(self):
        self._tmp.cleanup()

    def _run(self, argv, client=None):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(["--store", self.store] + argv, client=client)
        return code, out.getvalue(), err.getvalue()

    def test_translate_then_history_then_offline(self):
        client = FakeLanguageModelClient(
            detection={"language": "fr", "confidence": 0.95},
            translation={"translation": "Hello world"},
        )
        code, out, _ = self._run(["translate", "Bonjour le monde", "--to", "en"], client=client)
        self.assertEqual(code, EXIT_OK)
        self.assertIn("Hello world", out)
        self.assertIn("Detected: French (Confidence: 95%)", out)

        code, out, _ = self._run(["history"])
        self.assertEqual(code, EXIT_OK)
        self.assertIn("auto -> en", out)
        self.assertIn("Bonjour le monde", out)

        offline_client = FakeLanguageModelClient()
        code, out, _ = self._run(["translate", "Bonjour le monde", "--to", "en", "--offline"], client=offline_client)
        self.assertEqual(code, EXIT_OK)
        self.assertIn("Translated from offline cache.", out)
        self.assertEqual(offline_client.detect_calls, [])

    def test_low_confidence_exit_code(self):
        client = FakeLanguageModelClient(detection={"language": "unknown", "confidence": 0.3})
        code, _, err = self._run(["translate", "xyz", "--to", "en"], client=client)
        self.assertEqual(code, EXIT_LOW_CONFIDENCE)
        self.assertIn("Language detection confidence is too low to translate.", err)

    def test_offline_miss(self):
        code, _, err = self._run(["translate", "Hallo", "--to", "en", "--offline"])
        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("offline cache", err)

    def test_store_after_subcommand(self):
        client = FakeLanguageModelClient(
            detection={"language": "fr", "confidence": 0.95},
            translation={"translation": "Hello"},
        )
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            translate_code = main(["translate", "Bonjour", "--to", "en", "--store", self.store], client=client)
            history_code = main(["history", "--store", self.store])
        self.assertEqual(translate_code, EXIT_OK)
        self.assertEqual(history_code, EXIT_OK)
        self.assertTrue(os.path.exists(self.store))
        self.assertIn("Bonjour", out.getvalue())

    def test_history_clear(self):
        code, out, _ = self._run(["history", "--clear"])
        self.assertEqual(code, EXIT_OK)
        self.assertIn("History cleared.", out)


if __name__ == "__main__":
    unittest.main()
