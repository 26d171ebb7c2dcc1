"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.grid import Grid


def profile_runs(
    grid: "Grid",
    n: int,
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``grid.run()`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    grid:
        Configured grid with both start and end set.
    n:
        Number of searches to profile.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    if n <= 0:
        raise ValueError("n must be positive")
    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        grid.run()
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_runs"]
