"""Tests for pixel-width line wrapping."""

import pytest

from booklayout.errors import ConfigurationError
from booklayout.font_metrics import FontMetrics, MINECRAFT_FONT
from booklayout.layout_config import LayoutConfig
from booklayout.wrapper import LineWrapper, split_paragraphs, wrap_text


SMALL_FONT = FontMetrics.from_table("Small", {"A": 4, "B": 4, "C": 4, "D": 4})
SPACED_FONT = FontMetrics.from_table("Spaced", {"A": 4, "B": 4, "C": 4, "D": 4, " ": 3})
NARROW = LayoutConfig(max_line_width=9)

SENTENCE = ("The quick brown fox jumps over the lazy dog and then keeps "
            "running until it reaches the far edge of the forest")


def texts(lines):
    return [line.text for line in lines]


def test_words_that_fill_a_line_wrap_without_trailing_space():
    """AB is 4+1+4 = 9 px: it fits exactly but leaves no room for a space."""
    lines = wrap_text("AB CD", SMALL_FONT, NARROW)
    assert texts(lines) == ["AB", "CD"]
    assert [line.width for line in lines] == [9, 9]


def test_empty_text_is_one_empty_line():
    lines = wrap_text("")
    assert texts(lines) == [""]
    assert lines[0].width == 0


def test_blank_lines_are_preserved():
    lines = wrap_text("a\n\nb")
    assert texts(lines) == ["a ", "", "b "]


def test_all_blank_input_keeps_line_count():
    assert texts(wrap_text("\n\n\n")) == ["", "", ""]


def test_short_paragraph_gets_trailing_space():
    lines = wrap_text("hello world")
    assert texts(lines) == ["hello world "]
    assert lines[0].width == MINECRAFT_FONT.width("hello world ")


def test_every_line_fits_the_budget():
    wrapper = LineWrapper()
    lines = wrapper.wrap(SENTENCE)
    assert len(lines) > 1
    for line in lines:
        assert line.width <= wrapper.max_line_width
        assert MINECRAFT_FONT.width(line.text) == line.width


def test_words_are_never_split():
    lines = wrap_text(SENTENCE)
    assert " ".join(line.text.strip() for line in lines) == SENTENCE


def test_oversized_word_gets_its_own_line():
    lines = wrap_text("A ABCD", SMALL_FONT, NARROW)
    assert texts(lines) == ["A", "ABCD"]
    assert lines[1].width == 19


def test_oversized_word_at_start_emits_no_empty_line():
    lines = wrap_text("ABCD", SMALL_FONT, NARROW)
    assert texts(lines) == ["ABCD"]


def test_leading_and_double_spaces_survive():
    assert texts(wrap_text(" a  b")) == [" a  b "]


def test_trailing_spaces_are_dropped():
    assert texts(wrap_text("a   ")) == ["a "]
    assert texts(wrap_text("   ")) == [""]


def test_escape_pair_kept_with_its_text():
    assert texts(wrap_text("§aAB", SMALL_FONT, NARROW)) == ["§aAB"]


def test_escape_pair_moves_to_next_line_with_its_word():
    lines = wrap_text("AB §cCD", SMALL_FONT, NARROW)
    assert texts(lines) == ["AB", "§cCD"]
    assert lines[1].chars[0].escape == "§c"


def test_escape_pairs_are_zero_width():
    lines = wrap_text("§aA§bB", SMALL_FONT, LayoutConfig(max_line_width=10))
    assert texts(lines) == ["§aA§bB"]
    assert lines[0].width == 10


def test_escape_at_line_start_counts_as_content():
    """A line holding only an escape pair takes a margin before its first run."""
    lines = wrap_text("§aA§bB", SMALL_FONT, NARROW)
    assert texts(lines) == ["§aA", "§bB"]
    assert [line.width for line in lines] == [5, 5]


def test_bold_pairs_are_dropped():
    lines = wrap_text("§lAB§r", SMALL_FONT, NARROW)
    assert texts(lines) == ["AB§r"]
    assert lines[0].plain_text == "AB"
    for line in wrap_text("§l§LBold §ltext§r here"):
        assert "§l" not in line.text
        assert "§L" not in line.text


def test_wide_characters_wrap_one_at_a_time():
    lines = wrap_text("日本語", config=LayoutConfig(max_line_width=20))
    assert texts(lines) == ["日本", "語"]
    assert [line.width for line in lines] == [17, 8]


def test_run_followed_by_wide_character_gets_no_space():
    lines = wrap_text("abc日")
    assert texts(lines) == ["abc日"]
    assert lines[0].width == 17 + 1 + 8


def test_unrecognized_escape_is_measured_as_text():
    lines = wrap_text("§z")
    assert texts(lines) == ["§z "]
    assert lines[0].width == 8 + 1 + 5 + 1 + 3


def test_japanese_paragraph_fits():
    wrapper = LineWrapper()
    lines = wrapper.wrap("日本語のテキストは一文字ずつ折り返されます。")
    assert len(lines) == 2
    assert all(line.width <= wrapper.max_line_width for line in lines)
    assert "".join(texts(lines)) == "日本語のテキストは一文字ずつ折り返されます。"


def test_rewrapping_a_line_is_stable():
    wrapper = LineWrapper()
    for line in wrapper.wrap(SENTENCE):
        rewrapped = wrapper.wrap_paragraph(line.text)
        assert texts(rewrapped) == [line.text]
        again = wrapper.wrap_paragraph(rewrapped[0].text)
        assert texts(again) == [line.text]


def test_split_paragraphs():
    assert split_paragraphs("") == [""]
    assert split_paragraphs("a\n") == ["a"]
    assert split_paragraphs("a\r\nb\rc\nd") == ["a", "b", "c", "d"]
    assert split_paragraphs("a\n\n") == ["a", ""]


@pytest.mark.parametrize("width", [0, -5])
def test_non_positive_width_is_rejected(width):
    with pytest.raises(ConfigurationError):
        LineWrapper(config=LayoutConfig(max_line_width=width))


def test_non_positive_page_size_is_rejected():
    with pytest.raises(ConfigurationError):
        LineWrapper(config=LayoutConfig(max_line_width=100, lines_per_page=0))


def test_space_kept_after_word_ending_in_escape():
    lines = wrap_text("§aGreen§r text")
    assert texts(lines) == ["§aGreen §rtext "]
    assert lines[0].plain_text == "Green text "


def test_leading_space_takes_a_margin():
    """0 + 1 + 9 > 9: the space is absorbed at the wrap and AB starts a fresh line."""
    lines = wrap_text(" AB", SPACED_FONT, NARROW)
    assert texts(lines) == ["AB"]
    assert lines[0].width == 9


def test_leading_space_kept_when_it_fits():
    lines = wrap_text(" AB", SPACED_FONT, LayoutConfig(max_line_width=10))
    assert texts(lines) == [" AB"]
    assert lines[0].width == 10


def test_double_space_at_wrap_point_is_absorbed():
    wrapper = LineWrapper(SPACED_FONT, NARROW)
    lines = wrapper.wrap("AB  CD")
    assert texts(lines) == ["AB", "CD"]
    for line in lines:
        assert texts(wrapper.wrap_paragraph(line.text)) == [line.text]


def test_double_space_after_trailing_space_is_absorbed():
    wrapper = LineWrapper(SPACED_FONT, LayoutConfig(max_line_width=20))
    lines = wrapper.wrap("AB  CD")
    assert texts(lines) == ["AB ", "CD "]
    assert texts(wrapper.wrap_paragraph("AB ")) == ["AB "]


def test_double_space_inside_line_survives():
    lines = wrap_text("AB  CD", SPACED_FONT, LayoutConfig(max_line_width=30))
    assert texts(lines) == ["AB  CD "]


def test_rewrapping_double_spaced_text_is_stable():
    text = ("Some  words   with §aextra  spaces§r and  §bcolor codes  scattered  "
            "through  the  whole  paragraph  until  it  wraps  a few  times")
    wrapper = LineWrapper()
    lines = wrapper.wrap(text)
    assert len(lines) > 2
    for line in lines:
        rewrapped = wrapper.wrap_paragraph(line.text)
        assert texts(rewrapped) == [line.text]


def test_trailing_space_normalization_is_idempotent():
    """A run cut off before a wide character gains its space on the first rewrap only."""
    wrapper = LineWrapper()
    first = wrapper.wrap("a" * 18 + "日")
    assert texts(first) == ["a" * 18, "日"]
    once = wrapper.wrap_paragraph(first[0].text)
    assert texts(once) == ["a" * 18 + " "]
    twice = wrapper.wrap_paragraph(once[0].text)
    assert texts(twice) == texts(once)
