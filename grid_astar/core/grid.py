"""Fixed-size grid of cells with walls, endpoints and the last search result."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Set

from .cell import Cell, Coord
from .errors import InvalidDimension, NotConfigured, OutOfBounds
from ..systems.search.heuristic import euclidean
from ..systems.search.pathfinding import a_star
from ..utils import observer

logger = logging.getLogger(__name__)

Heuristic = Callable[[Coord, Coord], float]

# Up, down, left, right.
_OFFSETS: tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

# Glyphs accepted by :meth:`Grid.from_layout`.
LAYOUT_WALL = "#"
LAYOUT_START = "S"
LAYOUT_END = "E"
LAYOUT_PLAIN = "."


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class CellKind(Enum):
    """Display classification of a cell, in precedence order."""

    WALL = "wall"
    START = "start"
    END = "end"
    PATH = "path"
    PLAIN = "plain"


class Grid:
    """Rectangular grid searched with A*.

    Cells are stored row-major (``cells[y][x]``) and created once. Walls and
    endpoints are changed through the mutators; :meth:`run` rewrites only the
    per-run search fields of each cell.
    """

    def __init__(self, width: int, height: int, heuristic: Heuristic = euclidean) -> None:
        if not _is_index(width) or not _is_index(height):
            raise InvalidDimension(f"grid dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"grid dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self.heuristic: Heuristic = heuristic
        self._cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]
        for row in self._cells:
            for cell in row:
                cell.neighbours = self._adjacent(cell.x, cell.y)

        self._start: Optional[Coord] = None
        self._end: Optional[Coord] = None
        self._path: Optional[List[Coord]] = None
        self._path_members: Set[Coord] = set()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_layout(cls, rows: Sequence[str], heuristic: Heuristic = euclidean) -> "Grid":
        """Build a grid from text rows.

        ``#`` marks a wall, ``S`` the start, ``E`` the end and ``.`` a plain
        cell. Rows must all have the same length.
        """

        rows = [row.rstrip("\n") for row in rows]
        if not rows or not rows[0]:
            raise InvalidDimension("layout must contain at least one non-empty row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidDimension("layout rows must all have the same length")

        grid = cls(width, len(rows), heuristic=heuristic)
        for y, row in enumerate(rows):
            for x, glyph in enumerate(row):
                if glyph == LAYOUT_WALL:
                    grid.set_wall(x, y, True)
                elif glyph == LAYOUT_START:
                    grid.set_start(x, y)
                elif glyph == LAYOUT_END:
                    grid.set_end(x, y)
                elif glyph != LAYOUT_PLAIN:
                    raise ValueError(f"unknown layout glyph {glyph!r} at ({x}, {y})")
        return grid

    def _adjacent(self, x: int, y: int) -> tuple[Coord, ...]:
        return tuple(
            (x + dx, y + dy)
            for dx, dy in _OFFSETS
            if 0 <= x + dx < self._width and 0 <= y + dy < self._height
        )

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self._width, self._height)

    # ------------------------------------------------------------------
    # Dimensions and cell access
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        """True for integer coordinates inside the grid."""
        if not _is_index(x) or not _is_index(y):
            return False
        return 0 <= x < self._width and 0 <= y < self._height

    def cell(self, x: int, y: int) -> Cell:
        """Return the :class:`Cell` at ``(x, y)``."""
        self._check(x, y)
        return self._cells[y][x]

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def walls(self) -> Iterator[Coord]:
        """Yield the coordinates of every wall, row by row."""
        for cell in self:
            if cell.is_wall:
                yield cell.coord

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def set_wall(self, x: int, y: int, flag: bool = True) -> None:
        self._check(x, y)
        self._cells[y][x].is_wall = bool(flag)
        self.clear_path()

    def toggle_wall(self, x: int, y: int) -> bool:
        """Flip the wall flag at ``(x, y)`` and return the new value."""
        self._check(x, y)
        flag = not self._cells[y][x].is_wall
        self.set_wall(x, y, flag)
        return flag

    def set_start(self, x: int, y: int) -> None:
        self._check(x, y)
        self._start = (x, y)
        self.clear_path()

    def set_end(self, x: int, y: int) -> None:
        self._check(x, y)
        self._end = (x, y)
        self.clear_path()

    def set_walls(self, coords: Iterable[Coord], flag: bool = True) -> None:
        """Set the wall flag on several cells, validating all of them first."""
        coords = list(coords)
        for x, y in coords:
            self._check(x, y)
        for x, y in coords:
            self._cells[y][x].is_wall = bool(flag)
        self.clear_path()

    def clear_path(self) -> None:
        self._path = None
        self._path_members = set()

    def reset(self) -> None:
        """Remove all walls, both endpoints and the last path."""
        for cell in self:
            cell.is_wall = False
        self._start = None
        self._end = None
        self.clear_path()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def start(self) -> Optional[Coord]:
        return self._start

    @property
    def end(self) -> Optional[Coord]:
        return self._end

    @property
    def path(self) -> Optional[List[Coord]]:
        """Ordered cells from start to end found by the last run, or ``None``."""
        return None if self._path is None else list(self._path)

    def is_wall(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self._cells[y][x].is_wall

    def is_start(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self._start == (x, y)

    def is_end(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self._end == (x, y)

    def is_on_path(self, x: int, y: int) -> bool:
        self._check(x, y)
        return (x, y) in self._path_members

    def classify(self, x: int, y: int) -> CellKind:
        """Return how the cell at ``(x, y)`` should be drawn."""
        if self.is_wall(x, y):
            return CellKind.WALL
        if self.is_start(x, y):
            return CellKind.START
        if self.is_end(x, y):
            return CellKind.END
        if self.is_on_path(x, y):
            return CellKind.PATH
        return CellKind.PLAIN

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def run(self) -> None:
        """Search for a path from start to end and store it in :attr:`path`.

        Raises :class:`NotConfigured` if either endpoint is unset. Finding no
        path is a normal outcome and leaves :attr:`path` as ``None``.
        """

        if self._start is None or self._end is None:
            raise NotConfigured("start and end must both be set before running")

        result = a_star(self)
        observer.record_run(result)
        self._path = result.path
        self._path_members = set(result.path) if result.path is not None else set()
        if result.path is None:
            logger.info("No path from %s to %s", self._start, self._end)

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, start={self._start}, end={self._end})"


__all__ = ["Grid", "CellKind", "Heuristic"]
