"""Custom exceptions for island map generation."""


class MapError(Exception):
    """Base exception for map errors."""

    pass


class PreconditionError(MapError, ValueError):
    """Raised when an operation is called with arguments it cannot accept."""

    pass
