"""Distance estimates from a cell to the end cell."""

from __future__ import annotations

import math
from typing import Callable, Dict, Tuple


Coord = Tuple[int, int]


def euclidean(a: Coord, b: Coord) -> float:
    """Return the straight-line distance between ``a`` and ``b``, rounded up.

    Never larger than the true step count on a 4-neighbour unit grid, so the
    first time the end cell is reached its cost is optimal.
    """

    return math.ceil(math.hypot(b[0] - a[0], b[1] - a[1]))


def manhattan(a: Coord, b: Coord) -> float:
    """Return the 4-neighbour step distance between ``a`` and ``b``."""

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


HEURISTICS: Dict[str, Callable[[Coord, Coord], float]] = {
    "euclidean": euclidean,
    "manhattan": manhattan,
}


def get_heuristic(name: str) -> Callable[[Coord, Coord], float]:
    """Return the heuristic registered under ``name``."""

    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(HEURISTICS))
        raise ValueError(f"unknown heuristic {name!r}; expected one of: {known}") from None


__all__ = ["euclidean", "manhattan", "HEURISTICS", "get_heuristic"]
