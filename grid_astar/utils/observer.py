"""Runtime observability helpers."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, Tuple

if TYPE_CHECKING:
    from ..systems.search.pathfinding import SearchResult

logger = logging.getLogger(__name__)

# Rolling history of the last 1000 runs as (elapsed seconds, expanded cells)
_RUN_HISTORY_LEN = 1000
_run_history: Deque[Tuple[float, int]] = deque(maxlen=_RUN_HISTORY_LEN)
_runs_without_path: int = 0


def record_run(result: "SearchResult") -> None:
    """Append ``result`` timing and expansion count to the rolling history."""

    global _runs_without_path
    _run_history.append((result.elapsed, result.expanded))
    if result.path is None:
        _runs_without_path += 1


def summary() -> Dict[str, Any]:
    """Return aggregate statistics over the recorded runs."""

    runs = len(_run_history)
    if not runs:
        return {"runs": 0, "avg_ms": None, "avg_expanded": None, "no_path": _runs_without_path}
    total_elapsed = sum(elapsed for elapsed, _ in _run_history)
    total_expanded = sum(expanded for _, expanded in _run_history)
    return {
        "runs": runs,
        "avg_ms": total_elapsed / runs * 1000.0,
        "avg_expanded": total_expanded / runs,
        "no_path": _runs_without_path,
    }


def log_stats() -> None:
    """Log the current :func:`summary`."""

    stats = summary()
    if not stats["runs"]:
        logger.info("No searches recorded yet.")
        return
    logger.info(
        "%d searches, avg %.2f ms, avg %.1f cells expanded, %d without path",
        stats["runs"],
        stats["avg_ms"],
        stats["avg_expanded"],
        stats["no_path"],
    )


def clear() -> None:
    """Forget all recorded runs."""

    global _runs_without_path
    _run_history.clear()
    _runs_without_path = 0


__all__ = ["record_run", "summary", "log_stats", "clear", "_run_history"]
