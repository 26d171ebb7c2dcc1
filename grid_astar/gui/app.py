"""Event and render loop for the pygame front end."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict

import pygame

from . import input as gui_input
from .renderer import Renderer
from .window import Window

if TYPE_CHECKING:
    from ..config import GuiConfig
    from ..core.grid import Grid

logger = logging.getLogger(__name__)


def run_gui(grid: "Grid", gui_config: "GuiConfig") -> None:
    """Open a window sized to ``grid`` and process events until closed."""

    size = (grid.width * gui_config.cell_size, grid.height * gui_config.cell_size)
    window = Window(size, caption=gui_config.caption)
    renderer = Renderer(grid, window, gui_config.cell_size)
    renderer.status = "S start, E end, W walls, X erase, Enter run, C clear"
    clock = pygame.time.Clock()
    state: Dict[str, Any] = {"running": True}

    logger.info("GUI started with a %dx%d grid.", grid.width, grid.height)
    try:
        while state["running"]:
            gui_input.handle_events(grid, renderer, state)
            renderer.update()
            clock.tick(gui_config.fps)
    finally:
        pygame.quit()
        logger.info("GUI closed.")


__all__ = ["run_gui"]
