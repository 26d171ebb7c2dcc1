"""A* search on a :class:`~grid_astar.core.grid.Grid`."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from ...core.errors import NotConfigured
from .frontier import Frontier

if TYPE_CHECKING:
    from ...core.grid import Grid

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


@dataclass
class SearchResult:
    """Outcome of a single search."""

    path: Optional[List[Coord]]
    expanded: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0

    @property
    def found(self) -> bool:
        return self.path is not None


def _reset(grid: "Grid", end: Coord) -> None:
    """Discard search state left by any earlier run."""

    for cell in grid:
        cell.reset(grid.heuristic(cell.coord, end))


def reconstruct_path(grid: "Grid", end: Coord) -> List[Coord]:
    """Follow predecessors back from ``end`` and return start..end inclusive."""

    path = [end]
    current = grid.cell(*end)
    while current.predecessor is not None:
        path.append(current.predecessor)
        current = grid.cell(*current.predecessor)
    path.reverse()
    return path


def a_star(grid: "Grid") -> SearchResult:
    """Return the shortest path between ``grid.start`` and ``grid.end``.

    Walls are never entered and every step costs 1. ``result.path`` is
    ``None`` when the frontier empties before the end cell is reached.
    """

    start, end = grid.start, grid.end
    if start is None or end is None:
        raise NotConfigured("grid has no start or end cell")

    began = time.perf_counter()
    _reset(grid, end)

    first = grid.cell(*start)
    first.g = 0
    first.f = first.h

    frontier = Frontier()
    frontier.push(start, first.f)
    expanded = 0
    max_frontier = 1
    path: Optional[List[Coord]] = None

    while frontier:
        coord = frontier.peek()
        if coord == end:
            path = reconstruct_path(grid, end)
            break
        frontier.remove(coord)
        expanded += 1
        current = grid.cell(*coord)

        for n in current.neighbours:
            neighbour = grid.cell(*n)
            if neighbour.is_wall:
                continue
            tentative_g = current.g + 1
            if tentative_g < neighbour.g:
                neighbour.predecessor = coord
                neighbour.g = tentative_g
                neighbour.f = tentative_g + neighbour.h
                frontier.push(n, neighbour.f)
        max_frontier = max(max_frontier, len(frontier))

    result = SearchResult(
        path=path,
        expanded=expanded,
        max_frontier=max_frontier,
        elapsed=time.perf_counter() - began,
    )
    logger.debug(
        "A* %s -> %s: %s, expanded=%d, max_frontier=%d",
        start,
        end,
        f"{len(path)} cells" if path is not None else "no path",
        expanded,
        max_frontier,
    )
    return result


__all__ = ["SearchResult", "a_star", "reconstruct_path"]
