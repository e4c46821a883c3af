"""Exceptions raised by the book layout engine and its collaborators."""


class BookLayoutError(Exception):
    """Base class for book layout errors."""


class ConfigurationError(BookLayoutError):
    """Raised when the engine is configured with an unusable width or page size."""


class HelpResourceNotFoundError(BookLayoutError):
    """Raised when a named help text is not bundled with the package."""
