"""Renderer painting a :class:`~grid_astar.core.grid.Grid` onto a :class:`Window`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.grid import CellKind
from .window import Window

if TYPE_CHECKING:
    from ..core.grid import Grid

CELL_COLOUR_MAP = {
    CellKind.WALL: (0, 0, 0),
    CellKind.START: (0, 128, 0),
    CellKind.END: (255, 0, 0),
    CellKind.PATH: (0, 0, 255),
    CellKind.PLAIN: (255, 255, 255),
}
GRID_LINE_COLOUR = (0, 0, 0)
STATUS_TEXT_COLOUR = (90, 90, 90)


class Renderer:
    """Draw each cell in the colour of its :class:`CellKind`, then grid lines."""

    def __init__(self, grid: "Grid", window: Window, cell_size: int = 20) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.grid = grid
        self.window = window
        self.cell_size = cell_size
        self.status: Optional[str] = None

    def screen_to_cell(self, pos: tuple[int, int]) -> Optional[tuple[int, int]]:
        """Return the cell under screen ``pos`` or ``None`` outside the grid."""
        x, y = pos[0] // self.cell_size, pos[1] // self.cell_size
        if not self.grid.in_bounds(x, y):
            return None
        return x, y

    def _render_cells(self) -> None:
        size = self.cell_size
        for y in range(self.grid.height):
            for x in range(self.grid.width):
                colour = CELL_COLOUR_MAP[self.grid.classify(x, y)]
                self.window.fill_rect((x * size, y * size, size, size), colour)

    def _render_lines(self) -> None:
        size = self.cell_size
        px_w = self.grid.width * size
        px_h = self.grid.height * size
        for x in range(0, px_w + 1, size):
            self.window.draw_line((x, 0), (x, px_h), GRID_LINE_COLOUR)
        for y in range(0, px_h + 1, size):
            self.window.draw_line((0, y), (px_w, y), GRID_LINE_COLOUR)

    def update(self) -> None:
        self.window.clear()
        self._render_cells()
        self._render_lines()
        if self.status:
            self.window.draw_text(self.status, 4, 4, STATUS_TEXT_COLOUR)
        self.window.refresh()


__all__ = ["Renderer", "CELL_COLOUR_MAP"]
