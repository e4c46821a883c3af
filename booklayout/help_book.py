"""Help books: bundled help texts laid out as written books."""

import enum
import logging
from importlib import resources
from typing import Callable, Optional

from .constants import BookConstants
from .errors import HelpResourceNotFoundError
from .font_metrics import FontMetrics
from .layout_config import DEFAULT_LAYOUT, LayoutConfig
from .model import WrittenBook
from .paginator import layout_pages

logger = logging.getLogger(__name__)


class HelpType(enum.Enum):
    """Available help texts: (resource file name, book title)."""
    TEST = ("test.txt", "Test")
    SAMPLE = ("sample.txt", "Sample")

    def __init__(self, file_name: str, title: str):
        self.file_name = file_name
        self.title = title

    @classmethod
    def from_name(cls, name: str) -> 'HelpType':
        """Look up a help type by enum name or title, case-insensitively.

        Raises:
            HelpResourceNotFoundError: If no help type matches.
        """
        for help_type in cls:
            if name.lower() in (help_type.name.lower(), help_type.title.lower()):
                return help_type
        raise HelpResourceNotFoundError(f"Unknown help book: {name}")


def load_help_text(help_type: HelpType) -> str:
    """Read a bundled help text as UTF-8.

    Raises:
        HelpResourceNotFoundError: If the resource is not bundled.
    """
    resource = (resources.files("booklayout")
                .joinpath(BookConstants.HELP_RESOURCE_DIR)
                .joinpath(help_type.file_name))
    try:
        return resource.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise HelpResourceNotFoundError(
            f"Help file not found: {help_type.file_name}") from e


def build_help_book(help_type: HelpType,
                    loader: Callable[[HelpType], str] = load_help_text,
                    metrics: Optional[FontMetrics] = None,
                    config: Optional[LayoutConfig] = None) -> WrittenBook:
    """Load a help text and lay it out as a written book.

    Args:
        help_type: Which help text to open.
        loader: Returns the raw text for a help type.
        metrics: Font used for measuring (default Minecraft font).
        config: Layout configuration (default written book layout).
    """
    text = loader(help_type)
    pages = layout_pages(text, metrics, config or DEFAULT_LAYOUT)
    logger.info(f"Built help book {help_type.title!r} with {len(pages)} pages")
    return WrittenBook(
        title=help_type.title,
        author=BookConstants.HELP_AUTHOR,
        pages=tuple(pages),
    )
