"""Immutable value types produced by the layout engine."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class StyledChar:
    """One character plus the escape pairs that precede it.

    ``char`` is empty only for escape pairs left over at the end of a
    paragraph with no character after them.
    """
    char: str
    escape: str = ""

    def __str__(self) -> str:
        return self.escape + self.char


@dataclass(frozen=True)
class DisplayLine:
    """A line that fits the book width (or holds a single oversized run).

    Attributes:
        chars: Characters of the line in display order
        width: Pixel width accounted by the wrapper
    """
    chars: Tuple[StyledChar, ...] = ()
    width: int = 0

    @property
    def text(self) -> str:
        """The line with escape pairs inline, ready for the book renderer."""
        return "".join(str(c) for c in self.chars)

    @property
    def plain_text(self) -> str:
        """The line without escape pairs."""
        return "".join(c.char for c in self.chars)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.chars)


@dataclass(frozen=True)
class Page:
    """A group of consecutive display lines."""
    lines: Tuple[DisplayLine, ...]

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)


@dataclass(frozen=True)
class WrittenBook:
    """A titled, authored sequence of pages."""
    title: str
    author: str
    pages: Tuple[Page, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def get_page(self, page_num: int) -> Page:
        """Get a page by 0-based index; raises IndexError when out of range."""
        return self.pages[page_num]
