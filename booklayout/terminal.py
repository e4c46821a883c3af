"""Terminal preview of book pages using Blessed."""

from typing import Dict, List, Optional

import blessed

from .constants import BookConstants
from .escape_codes import DEFAULT_STYLE_CODES, StyleCodes
from .model import DisplayLine, Page, WrittenBook

# Escape code -> blessed formatting attribute
_CODE_ATTRIBUTES: Dict[str, str] = {
    "0": "black",
    "1": "blue",
    "2": "green",
    "3": "cyan",
    "4": "red",
    "5": "magenta",
    "6": "yellow",
    "7": "white",
    "8": "bright_black",
    "9": "bright_blue",
    "a": "bright_green",
    "b": "bright_cyan",
    "c": "bright_red",
    "d": "bright_magenta",
    "e": "bright_yellow",
    "f": "bright_white",
    "n": "underline",
    "o": "italic",
    "r": "normal",
}


class BookPreview:
    """Renders book pages as terminal text, translating escape pairs."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 width: int = BookConstants.PREVIEW_WIDTH,
                 styles: StyleCodes = DEFAULT_STYLE_CODES):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.width = width
        self.styles = styles

    def style_line(self, line: DisplayLine) -> str:
        """Return the line with escape pairs turned into terminal sequences.

        Codes without a terminal equivalent (obfuscated, strikethrough,
        hex color) are dropped. Styling is reset at the end of the line.
        """
        out: List[str] = []
        for styled in line.chars:
            escape = styled.escape
            for i in range(0, len(escape), 2):
                attribute = _CODE_ATTRIBUTES.get(escape[i + 1].lower())
                if attribute:
                    out.append(str(getattr(self.term, attribute)))
            out.append(styled.char)
        if any(c.escape for c in line.chars):
            out.append(str(self.term.normal))
        return "".join(out)

    def page_rule(self, page_num: int, total: int) -> str:
        """Create a centered rule line with the page number."""
        page_text = f" Page {page_num} of {total} "
        padding = max(0, (self.width - len(page_text)) // 2)
        right = max(0, self.width - padding - len(page_text))
        return BookConstants.PAGE_RULE_CHAR * padding + page_text + BookConstants.PAGE_RULE_CHAR * right

    def render_page(self, page: Page, page_num: int, total: int) -> List[str]:
        """Render one page (1-based number) under its rule line."""
        return [self.page_rule(page_num, total)] + [self.style_line(line) for line in page]

    def render_pages(self, pages: List[Page]) -> List[str]:
        output: List[str] = []
        for i, page in enumerate(pages):
            output.extend(self.render_page(page, i + 1, len(pages)))
        return output

    def render_book(self, book: WrittenBook) -> List[str]:
        """Render a titled book: a title line followed by every page."""
        header = f"{self.term.bold}{book.title}{self.term.normal} by {book.author}"
        return [header] + self.render_pages(list(book.pages))
