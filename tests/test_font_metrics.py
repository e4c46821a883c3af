"""Unit tests for the font metrics module."""

import unittest
from booklayout.constants import BookConstants
from booklayout.font_metrics import (
    FontMetrics,
    FONT_METRICS,
    MINECRAFT_FONT,
    get_font_metrics,
)
from booklayout.layout_config import DEFAULT_LAYOUT


class TestFontMetrics(unittest.TestCase):
    """Test font width lookups."""

    def test_known_characters(self):
        self.assertTrue(MINECRAFT_FONT.is_known("a"))
        self.assertTrue(MINECRAFT_FONT.is_known("Z"))
        self.assertTrue(MINECRAFT_FONT.is_known(" "))
        self.assertTrue(MINECRAFT_FONT.is_known("é"))

    def test_unknown_characters(self):
        """CJK characters and the style marker are not in the table."""
        self.assertFalse(MINECRAFT_FONT.is_known("日"))
        self.assertFalse(MINECRAFT_FONT.is_known("★"))
        self.assertFalse(MINECRAFT_FONT.is_known(BookConstants.STYLE_MARKER))

    def test_char_width_fallback(self):
        self.assertEqual(MINECRAFT_FONT.char_width("日"), BookConstants.WIDE_CHAR_WIDTH)
        self.assertEqual(MINECRAFT_FONT.char_width("a"), 5)
        self.assertEqual(MINECRAFT_FONT.char_width("i"), 1)
        self.assertEqual(MINECRAFT_FONT.space_width, 3)

    def test_width_of_word_adds_margins(self):
        self.assertEqual(MINECRAFT_FONT.width_of_word(""), 0)
        self.assertEqual(MINECRAFT_FONT.width_of_word("a"), 5)
        self.assertEqual(MINECRAFT_FONT.width_of_word("ab"), 11)
        # i(1) + l(2) + one margin
        self.assertEqual(MINECRAFT_FONT.width_of_word("il"), 4)

    def test_default_line_width(self):
        """Nineteen capital L's: 19 * 5 + 18 margins."""
        self.assertEqual(MINECRAFT_FONT.width_of_word(BookConstants.LINE_WIDTH_SAMPLE), 113)
        self.assertEqual(DEFAULT_LAYOUT.max_line_width, 113)
        self.assertEqual(DEFAULT_LAYOUT.lines_per_page, 13)

    def test_width_skips_escape_pairs(self):
        self.assertEqual(MINECRAFT_FONT.width("§aab"), 11)
        self.assertEqual(MINECRAFT_FONT.width("§a"), 0)
        self.assertEqual(MINECRAFT_FONT.width(""), 0)

    def test_width_counts_spaces_and_wide_glyphs(self):
        self.assertEqual(MINECRAFT_FONT.width("a b"), 5 + 3 + 5 + 2)
        self.assertEqual(MINECRAFT_FONT.width("日本"), 8 + 8 + 1)

    def test_width_unrecognized_escape_is_measured(self):
        """A marker before an unknown code is an ordinary wide glyph."""
        self.assertEqual(MINECRAFT_FONT.width("§z"), 8 + 5 + 1)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            MINECRAFT_FONT.widths["a"] = 1  # type: ignore[index]

    def test_from_table_copies_input(self):
        table = {"A": 4}
        metrics = FontMetrics.from_table("Test", table, fallback_width=6)
        table["B"] = 4
        self.assertFalse(metrics.is_known("B"))
        self.assertEqual(metrics.char_width("B"), 6)
        self.assertEqual(metrics.char_margin, 1)

    def test_registry(self):
        self.assertIs(get_font_metrics("Minecraft"), MINECRAFT_FONT)
        self.assertIsNone(get_font_metrics("Unknown Font"))
        self.assertIn(BookConstants.DEFAULT_FONT, FONT_METRICS)


if __name__ == '__main__':
    unittest.main()
