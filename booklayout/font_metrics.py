"""Font metrics for the written book font.

This module defines the glyph width table of the default Minecraft font
and the queries the line wrapper uses to measure text. Widths are in
integer pixels and exclude the one pixel margin drawn between glyphs.
Characters missing from the table (CJK and other full-width scripts,
most symbols) are measured with a single fallback width.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .constants import BookConstants
from .escape_codes import DEFAULT_STYLE_CODES, StyleCodes


# Glyphs narrower than the 5 pixel default
_NARROW_GLYPHS: Dict[str, int] = {
    " ": 3,
    "!": 1, "'": 1, ",": 1, ".": 1, ":": 1, ";": 1, "i": 1, "|": 1, "¡": 1,
    "`": 2, "l": 2, "ì": 2, "í": 2,
    '"': 3, "(": 3, ")": 3, "*": 3, "I": 3, "[": 3, "]": 3, "t": 3,
    "{": 3, "}": 3, "ï": 3,
    "<": 4, ">": 4, "f": 4, "k": 4, "î": 4,
    "@": 6, "~": 6,
}

# Latin-1 letters and signs drawn by the default font
_LATIN_EXTRAS = "ÇüéâäàåçêëèïîìÄÅÉæÆôöòûùÿÖÜø£Ø×ƒáíóúñÑªº¿®¬½¼¡«»"


def _build_minecraft_widths() -> Dict[str, int]:
    widths: Dict[str, int] = {}
    for code in range(0x20, 0x7F):
        widths[chr(code)] = 5
    for ch in _LATIN_EXTRAS:
        widths[ch] = 5
    widths.update(_NARROW_GLYPHS)
    return widths


@dataclass(frozen=True)
class FontMetrics:
    """Pixel widths for a book font.

    Attributes:
        name: Display name of the font
        widths: Read-only mapping from character to glyph width
        fallback_width: Width used for every character not in ``widths``
        char_margin: Pixels drawn between two adjacent glyphs
    """
    name: str
    widths: Mapping[str, int]
    fallback_width: int = BookConstants.WIDE_CHAR_WIDTH
    char_margin: int = BookConstants.CHAR_MARGIN

    @classmethod
    def from_table(cls, name: str, widths: Mapping[str, int],
                   fallback_width: int = BookConstants.WIDE_CHAR_WIDTH,
                   char_margin: int = BookConstants.CHAR_MARGIN) -> 'FontMetrics':
        """Create metrics from a width table, freezing a private copy of it."""
        return cls(
            name=name,
            widths=MappingProxyType(dict(widths)),
            fallback_width=fallback_width,
            char_margin=char_margin,
        )

    def is_known(self, ch: str) -> bool:
        """Return True if ``ch`` has an explicit entry in the width table."""
        return ch in self.widths

    def char_width(self, ch: str) -> int:
        return self.widths.get(ch, self.fallback_width)

    @property
    def space_width(self) -> int:
        return self.char_width(" ")

    def width_of_word(self, word: str) -> int:
        """Measure a run of known characters.

        Returns the sum of glyph widths plus one margin between each pair
        of adjacent glyphs. The caller adds the margin that separates the
        run from text already on the line.
        """
        if not word:
            return 0
        return sum(self.char_width(ch) for ch in word) + self.char_margin * (len(word) - 1)

    def width(self, text: str, styles: StyleCodes = DEFAULT_STYLE_CODES) -> int:
        """Measure an arbitrary string as it would be drawn.

        Recognized escape pairs are zero width. Every other character,
        spaces included, contributes its glyph width, with one margin
        between adjacent glyphs.
        """
        total = 0
        count = 0
        i = 0
        while i < len(text):
            if i + 1 < len(text) and styles.is_escape(text[i], text[i + 1]):
                i += 2
                continue
            total += self.char_width(text[i])
            count += 1
            i += 1
        if count == 0:
            return 0
        return total + self.char_margin * (count - 1)


MINECRAFT_FONT = FontMetrics.from_table(BookConstants.DEFAULT_FONT, _build_minecraft_widths())

# Pre-defined font metrics
FONT_METRICS: Dict[str, FontMetrics] = {
    MINECRAFT_FONT.name: MINECRAFT_FONT,
}


def get_font_metrics(font_name: str) -> Optional[FontMetrics]:
    """Get font metrics by name.

    Args:
        font_name: Name of the font

    Returns:
        FontMetrics if found, None otherwise
    """
    return FONT_METRICS.get(font_name)
