"""Constants and configuration for the book layout engine."""

class BookConstants:
    """Central configuration constants for written book layout."""

    # Style/color escape codes
    STYLE_MARKER = "§"  # Section sign that starts a two-character code
    STYLE_CODES = "0123456789abcdefklmnorx"  # Matched case-insensitively
    BOLD_CODES = "lL"  # Bold changes glyph width, so these are always dropped

    # Font metrics
    CHAR_MARGIN = 1  # Pixels between two adjacent glyphs
    WIDE_CHAR_WIDTH = 8  # Fallback width for glyphs outside the font table
    DEFAULT_FONT = "Minecraft"

    # Page layout
    LINE_WIDTH_SAMPLE = "L" * 19  # A full book line, measured with the font
    LINES_PER_PAGE = 13

    # Help books
    HELP_AUTHOR = "Master"
    HELP_RESOURCE_DIR = "help"

    # Preview
    PAGE_RULE_CHAR = "─"
    PREVIEW_WIDTH = 40
