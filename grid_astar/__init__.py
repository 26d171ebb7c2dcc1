"""A* shortest paths on a 2-D grid of walls and open cells."""

from .core.grid import Grid, CellKind
from .core.errors import GridError, InvalidDimension, OutOfBounds, NotConfigured

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "CellKind",
    "GridError",
    "InvalidDimension",
    "OutOfBounds",
    "NotConfigured",
]
