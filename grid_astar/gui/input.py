"""Translate ``pygame`` events into grid edits and search requests."""

from __future__ import annotations

import logging
from typing import Any, Dict

import pygame

from ..core.errors import NotConfigured

logger = logging.getLogger(__name__)

TOOL_KEYS = {
    pygame.K_s: "start",
    pygame.K_e: "end",
    pygame.K_w: "wall",
    pygame.K_x: "erase",
}
DEFAULT_TOOL = "wall"


def apply_tool(grid: Any, tool: str, cell: tuple[int, int]) -> bool:
    """Apply ``tool`` to ``cell``. Return ``True`` if the grid changed.

    Start and end are never placed on walls, and walls are never drawn over
    the start or end cell.
    """
    x, y = cell
    if tool == "start":
        if grid.is_wall(x, y) or grid.is_start(x, y):
            return False
        grid.set_start(x, y)
        return True
    if tool == "end":
        if grid.is_wall(x, y) or grid.is_end(x, y):
            return False
        grid.set_end(x, y)
        return True
    if tool == "wall":
        if grid.is_wall(x, y) or grid.is_start(x, y) or grid.is_end(x, y):
            return False
        grid.set_wall(x, y, True)
        return True
    if tool == "erase":
        if not grid.is_wall(x, y):
            return False
        grid.set_wall(x, y, False)
        return True
    logger.warning("Unknown tool: %s", tool)
    return False


def run_search(grid: Any, renderer: Any) -> None:
    try:
        grid.run()
    except NotConfigured:
        renderer.status = "Place a start (S) and an end (E) first."
        logger.warning("Run requested before start and end were placed.")
        return
    path = grid.path
    renderer.status = f"Path: {len(path)} cells" if path is not None else "No path."


def handle_events(grid: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events: tool keys, mouse painting, run, reset, quit."""
    state.setdefault("tool", DEFAULT_TOOL)

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            cell = renderer.screen_to_cell(ev.pos)
            if cell is not None:
                apply_tool(grid, state["tool"], cell)

        elif ev.type == pygame.MOUSEMOTION and ev.buttons and ev.buttons[0]:
            if state["tool"] in ("wall", "erase"):
                cell = renderer.screen_to_cell(ev.pos)
                if cell is not None:
                    apply_tool(grid, state["tool"], cell)

        elif ev.type == pygame.KEYDOWN:
            if ev.key in TOOL_KEYS:
                state["tool"] = TOOL_KEYS[ev.key]
                renderer.status = f"Tool: {state['tool']}"
            elif ev.key in (pygame.K_RETURN, pygame.K_SPACE):
                run_search(grid, renderer)
            elif ev.key == pygame.K_c:
                grid.reset()
                renderer.status = "Grid cleared."
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return


__all__ = ["handle_events", "apply_tool", "run_search", "TOOL_KEYS"]
