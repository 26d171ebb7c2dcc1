"""Cell component holding static and per-run search data."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple


Coord = Tuple[int, int]


@dataclass
class Cell:
    """A single grid square.

    ``predecessor`` is a coordinate handle into the owning grid rather than a
    reference to another :class:`Cell`.
    """

    x: int
    y: int
    is_wall: bool = False
    g: float = math.inf
    h: float = 0.0
    f: float = math.inf
    predecessor: Optional[Coord] = None
    neighbours: Tuple[Coord, ...] = field(default_factory=tuple)

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def reset(self, h: float) -> None:
        """Clear search state from a previous run and store a fresh ``h``."""
        self.g = math.inf
        self.f = math.inf
        self.predecessor = None
        self.h = h


__all__ = ["Cell", "Coord"]
