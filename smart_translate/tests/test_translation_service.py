import unittest
from unittest.mock import MagicMock

from smart_translate.services.errors import TranslationFailure
from smart_translate.services.llm_client_service import ChatCompletionClient
from smart_translate.services.translation_service import translate
from smart_translate.tests.fake_llm_client import FakeLanguageModelClient


class TestTranslationService(unittest.TestCase):

    def test_translate_calls_client(self):
        mock_client = MagicMock(spec=ChatCompletionClient)
        mock_client.translate_markup.return_value = {"translation": "Hello world"}

        result = translate("Bonjour le monde", "en", client=mock_client)

        self.assertEqual(result, "Hello world")
        mock_client.translate_markup.assert_called_once_with("Bonjour le monde", "en")

    def test_markup_is_preserved(self):
        source = '<h1 class="title">Hello</h1><p data-x="1">World</p>'
        client = FakeLanguageModelClient(translation={"translation": '<h1 class="title">Hola</h1><p data-x="1">Mundo</p>'})

        result = translate(source, "es", client=client, strict_markup=True)

        self.assertEqual(result, '<h1 class="title">Hola</h1><p data-x="1">Mundo</p>')

    def test_plain_text_comparison_passes_strict_markup(self):
        client = FakeLanguageModelClient(translation={"translation": "if a<b then b>c"})
        self.assertEqual(translate("si a<b alors b>c", "en", client=client, strict_markup=True), "if a<b then b>c")

    def test_altered_markup_is_rejected(self):
        client = FakeLanguageModelClient(translation={"translation": "<h2>Hola</h2>"})
        with self.assertRaises(TranslationFailure):
            translate("<h1>Hello</h1>", "es", client=client, strict_markup=True)

    def test_altered_markup_allowed_when_not_strict(self):
        client = FakeLanguageModelClient(translation={"translation": "<h2>Hola</h2>"})
        self.assertEqual(translate("<h1>Hello</h1>", "es", client=client, strict_markup=False), "<h2>Hola</h2>")

    def test_no_result_raises(self):
        for output in (None, {}, {"translation": ""}, {"translation": "   "}, {"translation": 42}):
            with self.subTest(output=output):
                with self.assertRaises(TranslationFailure) as ctx:
                    translate("Hello", "fr", client=FakeLanguageModelClient(translation=output))
                self.assertEqual(str(ctx.exception), "Could not translate text.")


if __name__ == "__main__":
    unittest.main()
