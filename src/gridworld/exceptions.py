"""Custom exceptions for the tile world."""


class GridWorldError(Exception):
    """Base exception for tile world errors."""

    pass


class ConfigurationError(GridWorldError):
    """Raised when configuration is invalid or cannot be loaded.

    Always raised at startup, before any frame runs.
    """

    pass


class UnmappedTerrainError(GridWorldError):
    """Raised when a terrain type has no configured color."""

    pass
