"""Booklayout - pixel-width text layout for written books."""

from .errors import BookLayoutError, ConfigurationError, HelpResourceNotFoundError
from .font_metrics import FontMetrics, MINECRAFT_FONT, get_font_metrics
from .layout_config import DEFAULT_LAYOUT, LayoutConfig
from .model import DisplayLine, Page, StyledChar, WrittenBook
from .paginator import layout_pages, paginate
from .wrapper import LineWrapper, wrap_text

__all__ = [
    'BookLayoutError',
    'ConfigurationError',
    'HelpResourceNotFoundError',
    'FontMetrics',
    'MINECRAFT_FONT',
    'get_font_metrics',
    'DEFAULT_LAYOUT',
    'LayoutConfig',
    'DisplayLine',
    'Page',
    'StyledChar',
    'WrittenBook',
    'LineWrapper',
    'wrap_text',
    'layout_pages',
    'paginate',
]
