import unittest

from smart_translate.utils.markup_utils import extract_tags, has_markup, preserves_markup, text_nodes


class TestMarkupUtils(unittest.TestCase):
    def test_extract_tags_verbatim(self):
        html = '<!DOCTYPE html><div id="a" class=\'b\'><!-- note --><img src="x.png"/>Hi</div>'
        self.assertEqual(
            extract_tags(html),
            ["<!DOCTYPE html>", '<div id="a" class=\'b\'>', "<!-- note -->", '<img src="x.png"/>', "</div>"],
        )

    def test_plain_text(self):
        self.assertFalse(has_markup("a < b and c > d"))
        self.assertTrue(preserves_markup("Hello", "Hola"))

    def test_preserves_markup(self):
        self.assertTrue(preserves_markup("<h1>Hello</h1>", "<h1>Hola</h1>"))
        self.assertFalse(preserves_markup("<h1>Hello</h1>", "<h1 class='x'>Hola</h1>"))
        self.assertFalse(preserves_markup("<h1>Hello</h1><p>x</p>", "<p>x</p><h1>Hola</h1>"))

    def test_comparisons_are_not_tags(self):
        self.assertEqual(extract_tags("si a<b alors b>c"), [])
        self.assertFalse(has_markup("x<y and y>z"))
        self.assertTrue(preserves_markup("si a<b alors b>c", "if a<b then b>c"))

    def test_unpaired_tags_are_ignored_but_void_tags_count(self):
        self.assertEqual(extract_tags("<p>Hi<br>there</p> a<b c>d"), ["<p>", "<br>", "</p>"])

    def test_text_nodes(self):
        self.assertEqual(text_nodes("<h1>Hello</h1>\n<p>World</p>"), ["Hello", "World"])


if __name__ == "__main__":
    unittest.main()
