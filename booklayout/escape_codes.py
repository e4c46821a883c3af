"""Inline style/color escape codes and the token scanner.

Book text carries two-character escape pairs such as ``§a`` (green) or
``§r`` (reset). A pair is atomic: both characters are kept together or
both dropped. Bold pairs (``§l``) are always dropped because bold glyphs
are one pixel wider than the font table says.

The scanner splits a single space-free token into segments:

- ``EscapeSegment`` for a recognized escape pair,
- ``RunSegment`` for a maximal run of characters the font knows,
- ``WideSegment`` for each character the font does not know.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Union

from .constants import BookConstants

if TYPE_CHECKING:
    from .font_metrics import FontMetrics


@dataclass(frozen=True)
class StyleCodes:
    """Recognized escape pairs.

    Attributes:
        marker: Character that opens an escape pair
        codes: Characters accepted after the marker (case-insensitive)
        bold_codes: Subset of codes whose pairs are dropped from output
    """
    marker: str = BookConstants.STYLE_MARKER
    codes: str = BookConstants.STYLE_CODES
    bold_codes: str = BookConstants.BOLD_CODES

    def is_code(self, ch: str) -> bool:
        return len(ch) == 1 and ch.lower() in self.codes.lower()

    def is_escape(self, first: str, second: str) -> bool:
        """Return True if the two characters form an escape pair."""
        return first == self.marker and self.is_code(second)

    def is_bold(self, code: str) -> bool:
        return code in self.bold_codes


DEFAULT_STYLE_CODES = StyleCodes()


@dataclass(frozen=True)
class EscapeSegment:
    pair: str
    bold: bool


@dataclass(frozen=True)
class RunSegment:
    text: str
    at_token_end: bool


@dataclass(frozen=True)
class WideSegment:
    char: str


Segment = Union[EscapeSegment, RunSegment, WideSegment]


class ScanState(enum.Enum):
    """States of the token scanner."""
    PLAIN = "plain"
    ESCAPE = "escape"  # A marker was consumed; the next character decides


def scan_token(token: str, metrics: "FontMetrics",
               styles: StyleCodes = DEFAULT_STYLE_CODES) -> List[Segment]:
    """Split one space-free token into escape, run and wide segments.

    A marker that is not followed by a recognized code is an ordinary
    character measured with the fallback width; the character after it
    is classified on its own. The last run ends the token when nothing
    but escape pairs follows it.
    """
    segments = list(_scan(token, metrics, styles))
    for i in range(len(segments) - 1, -1, -1):
        segment = segments[i]
        if isinstance(segment, RunSegment):
            segments[i] = RunSegment(segment.text, True)
            break
        if not isinstance(segment, EscapeSegment):
            break
    return segments


def _scan(token: str, metrics: "FontMetrics", styles: StyleCodes) -> Iterator[Segment]:
    state = ScanState.PLAIN
    run: List[str] = []

    def flush_run() -> Iterator[Segment]:
        if run:
            text = "".join(run)
            run.clear()
            yield RunSegment(text, False)

    for ch in token:
        if state is ScanState.ESCAPE:
            state = ScanState.PLAIN
            if styles.is_code(ch):
                yield EscapeSegment(styles.marker + ch, styles.is_bold(ch))
                continue
            # Unrecognized code: the marker is a plain glyph
            yield WideSegment(styles.marker)

        if ch == styles.marker:
            yield from flush_run()
            state = ScanState.ESCAPE
        elif metrics.is_known(ch):
            run.append(ch)
        else:
            yield from flush_run()
            yield WideSegment(ch)

    if state is ScanState.ESCAPE:
        yield WideSegment(styles.marker)
    yield from flush_run()


def strip_escapes(text: str, styles: StyleCodes = DEFAULT_STYLE_CODES) -> str:
    """Return text with every recognized escape pair removed."""
    out: List[str] = []
    i = 0
    while i < len(text):
        if i + 1 < len(text) and styles.is_escape(text[i], text[i + 1]):
            i += 2
            continue
        out.append(text[i])
        i += 1
    return "".join(out)
