"""Exceptions raised by the grid model and search engine."""

from __future__ import annotations


class GridError(Exception):
    """Base class for grid engine errors."""


class InvalidDimension(GridError, ValueError):
    """Raised when a grid is built with non-positive or malformed dimensions."""


class OutOfBounds(GridError, IndexError):
    """Raised when a coordinate is not an integer position inside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"({x}, {y}) is outside the {width}x{height} grid"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class NotConfigured(GridError, RuntimeError):
    """Raised when a search is requested before start and end are set."""


__all__ = ["GridError", "InvalidDimension", "OutOfBounds", "NotConfigured"]
