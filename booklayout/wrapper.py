"""Pixel-width word wrap for written book text.

Text is wrapped paragraph by paragraph. Each paragraph is split on ASCII
spaces and every token is scanned into escape pairs, runs of characters
the font knows, and single unknown (wide) characters. Runs are kept
together: a run that does not fit on the current line moves to the next
line as a whole, and a run wider than the whole line is emitted intact
on a line of its own.
"""

import logging
import re
from typing import List, Optional

from .escape_codes import (
    DEFAULT_STYLE_CODES,
    EscapeSegment,
    RunSegment,
    StyleCodes,
    scan_token,
)
from .font_metrics import FontMetrics, MINECRAFT_FONT
from .layout_config import DEFAULT_LAYOUT, LayoutConfig
from .model import DisplayLine, StyledChar

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_paragraphs(text: str) -> List[str]:
    """Split text on line breaks.

    A single trailing line break does not start another paragraph, and
    empty text is one empty paragraph.
    """
    paragraphs = _LINE_BREAK.split(text)
    if len(paragraphs) > 1 and paragraphs[-1] == "":
        paragraphs.pop()
    return paragraphs


class _LineBuilder:
    """Accumulates one display line until it is flushed.

    Escape pairs and spaces from empty tokens are held as pending, in
    order, until the next character is appended. A flush moves pending
    escapes to the new line together with their text; pending spaces at a
    wrap point are dropped, like the trailing space that did not fit.
    """

    def __init__(self) -> None:
        self._chars: List[StyledChar] = []
        self._pending: List[str] = []
        self.width = 0

    @property
    def has_chars(self) -> bool:
        return bool(self._chars)

    @property
    def has_content(self) -> bool:
        """True once anything, even a zero-width escape or space, is on the line."""
        return bool(self._chars or self._pending)

    def add_escape(self, pair: str) -> None:
        self._pending.append(pair)

    def add_space(self) -> None:
        self._pending.append(" ")

    def drop_pending_spaces(self) -> None:
        self._pending = [piece for piece in self._pending if piece != " "]

    def _take_pending(self) -> str:
        """Materialize pending spaces; return the escapes left for the next char."""
        escape = ""
        for piece in self._pending:
            if piece == " ":
                self._chars.append(StyledChar(" ", escape))
                escape = ""
            else:
                escape += piece
        self._pending = []
        return escape

    def append(self, text: str) -> None:
        escape = self._take_pending()
        for ch in text:
            self._chars.append(StyledChar(ch, escape))
            escape = ""

    def flush(self, final: bool = False) -> DisplayLine:
        if final:
            escape = self._take_pending()
            if escape:
                self._chars.append(StyledChar("", escape))
        line = DisplayLine(tuple(self._chars), self.width)
        self._chars = []
        self.width = 0
        return line


class LineWrapper:
    """Wraps text into display lines that fit a pixel budget."""

    def __init__(self, metrics: Optional[FontMetrics] = None,
                 config: Optional[LayoutConfig] = None,
                 styles: StyleCodes = DEFAULT_STYLE_CODES):
        """Initialize the wrapper.

        Args:
            metrics: Font used to measure text (default Minecraft font).
            config: Layout configuration; only ``max_line_width`` is used.
            styles: Recognized escape pairs.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        self.metrics = metrics or MINECRAFT_FONT
        self.config = (config or DEFAULT_LAYOUT).validate()
        self.styles = styles

    @property
    def max_line_width(self) -> int:
        return self.config.max_line_width

    def wrap(self, text: str) -> List[DisplayLine]:
        """Wrap multi-line text; every paragraph yields at least one line."""
        lines: List[DisplayLine] = []
        for paragraph in split_paragraphs(text):
            lines.extend(self.wrap_paragraph(paragraph))
        return lines

    def wrap_paragraph(self, paragraph: str) -> List[DisplayLine]:
        """Wrap a single paragraph (text without line breaks)."""
        if not paragraph:
            return [DisplayLine()]

        tokens = paragraph.split(" ")
        # Trailing spaces are not reproduced
        while tokens and tokens[-1] == "":
            tokens.pop()

        lines: List[DisplayLine] = []
        line = _LineBuilder()
        margin = self.metrics.char_margin
        for token in tokens:
            if not token:
                # Leading or consecutive space
                line.add_space()
                continue
            for segment in scan_token(token, self.metrics, self.styles):
                if isinstance(segment, EscapeSegment):
                    if not segment.bold:
                        line.add_escape(segment.pair)
                elif isinstance(segment, RunSegment):
                    self._place(line, lines, segment.text,
                                self.metrics.width_of_word(segment.text))
                    space = margin + self.metrics.space_width
                    if segment.at_token_end and line.width + space <= self.max_line_width:
                        line.append(" ")
                        line.width += space
                else:
                    self._place(line, lines, segment.char,
                                self.metrics.char_width(segment.char))
        lines.append(line.flush(final=True))
        return lines

    def _place(self, line: _LineBuilder, lines: List[DisplayLine],
               text: str, width: int) -> None:
        """Append a run to the line, flushing first if it would overflow."""
        margin = self.metrics.char_margin if line.has_content else 0
        if line.width + margin + width > self.max_line_width:
            if line.has_chars:
                lines.append(line.flush())
            line.drop_pending_spaces()
            margin = self.metrics.char_margin if line.has_content else 0
            if margin + width > self.max_line_width:
                # Only escapes precede the run; start it like a fresh line
                margin = 0
        if width > self.max_line_width:
            logger.debug("Run %r is %d px wide, wider than a %d px line",
                         text, width, self.max_line_width)
        line.append(text)
        line.width += margin + width


def wrap_text(text: str, metrics: Optional[FontMetrics] = None,
              config: Optional[LayoutConfig] = None) -> List[DisplayLine]:
    """Wrap text with a fresh LineWrapper."""
    return LineWrapper(metrics, config).wrap(text)
