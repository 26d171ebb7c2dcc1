"""Priority queue of cells awaiting expansion."""

from __future__ import annotations

from heapq import heapify, heappop, heappush
from itertools import count
from typing import Dict, List, Tuple


Coord = Tuple[int, int]
_Entry = Tuple[float, int, Coord]


class Frontier:
    """Open set ordered by ascending ``f``.

    Priorities are captured when a cell is pushed. Pushing a cell that is
    already queued is a no-op, so a later improvement of that cell's ``f``
    does not move it within the queue. Ties on ``f`` are broken by insertion
    order.
    """

    def __init__(self) -> None:
        self._heap: List[_Entry] = []
        self._members: Dict[Coord, _Entry] = {}
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, coord: object) -> bool:
        return coord in self._members

    def push(self, coord: Coord, f: float) -> bool:
        """Queue ``coord`` with priority ``f``. Return ``False`` if already queued."""
        if coord in self._members:
            return False
        entry = (f, next(self._counter), coord)
        self._members[coord] = entry
        heappush(self._heap, entry)
        return True

    def peek(self) -> Coord:
        """Return the lowest-priority cell without removing it."""
        if not self._heap:
            raise IndexError("peek from an empty frontier")
        return self._heap[0][2]

    def remove(self, coord: Coord) -> None:
        """Remove ``coord`` from the queue, wherever it sits."""
        entry = self._members.pop(coord, None)
        if entry is None:
            raise KeyError(coord)
        if self._heap[0] is entry:
            heappop(self._heap)
            return
        self._heap.remove(entry)
        heapify(self._heap)

    def pop(self) -> Coord:
        """Remove and return the lowest-priority cell."""
        coord = self.peek()
        self.remove(coord)
        return coord


__all__ = ["Frontier"]
