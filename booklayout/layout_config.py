"""Layout configuration for written books.

A ``LayoutConfig`` bundles the pixel width budget, the page size and the
font used to measure text. The default width is whatever a full line of
nineteen capital L's measures in the configured font.
"""

from dataclasses import dataclass

from .constants import BookConstants
from .errors import ConfigurationError
from .font_metrics import FontMetrics, MINECRAFT_FONT


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for one layout run.

    Attributes:
        max_line_width: Pixel budget of a display line
        lines_per_page: Number of display lines on a full page
        font_name: Name of the font the width was derived from
    """
    max_line_width: int
    lines_per_page: int = BookConstants.LINES_PER_PAGE
    font_name: str = BookConstants.DEFAULT_FONT

    @classmethod
    def for_font(cls, metrics: FontMetrics,
                 lines_per_page: int = BookConstants.LINES_PER_PAGE) -> 'LayoutConfig':
        """Create the standard book configuration for a font."""
        return cls(
            max_line_width=metrics.width_of_word(BookConstants.LINE_WIDTH_SAMPLE),
            lines_per_page=lines_per_page,
            font_name=metrics.name,
        )

    def validate(self) -> 'LayoutConfig':
        """Check the configuration; returns self so calls can be chained.

        Raises:
            ConfigurationError: If the width or page size is not positive.
        """
        if self.max_line_width <= 0:
            raise ConfigurationError(
                f"max_line_width must be positive, got {self.max_line_width}")
        if self.lines_per_page <= 0:
            raise ConfigurationError(
                f"lines_per_page must be positive, got {self.lines_per_page}")
        return self


DEFAULT_LAYOUT = LayoutConfig.for_font(MINECRAFT_FONT)
