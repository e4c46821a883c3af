"""Group display lines into fixed-size book pages."""

import logging
from typing import List, Optional, Sequence

from .errors import ConfigurationError
from .font_metrics import FontMetrics
from .layout_config import DEFAULT_LAYOUT, LayoutConfig
from .model import DisplayLine, Page
from .wrapper import LineWrapper

logger = logging.getLogger(__name__)


def paginate(lines: Sequence[DisplayLine], page_size: int) -> List[Page]:
    """Split lines into pages of ``page_size`` lines.

    Every page is full except possibly the last, which holds the
    remaining 1..page_size lines. An empty sequence gives a single page
    with one empty line, so a book always has something to open.

    Raises:
        ConfigurationError: If ``page_size`` is not positive.
    """
    if page_size <= 0:
        raise ConfigurationError(f"page_size must be positive, got {page_size}")
    if not lines:
        lines = [DisplayLine()]

    pages: List[Page] = []
    current: List[DisplayLine] = []
    for line in lines:
        current.append(line)
        if len(current) == page_size:
            pages.append(_close_page(current, len(pages) + 1))
            current = []
    if current:
        pages.append(_close_page(current, len(pages) + 1))
    return pages


def _close_page(lines: List[DisplayLine], page_num: int) -> Page:
    page = Page(tuple(lines))
    logger.debug("Page %d (%d lines):\n%s", page_num, len(page), page.text)
    return page


def layout_pages(text: str, metrics: Optional[FontMetrics] = None,
                 config: Optional[LayoutConfig] = None) -> List[Page]:
    """Wrap text and group the lines into pages."""
    config = config or DEFAULT_LAYOUT
    wrapper = LineWrapper(metrics, config)
    return paginate(wrapper.wrap(text), config.lines_per_page)
