"""ASCII terminal renderer for grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Dict, List, TextIO, Tuple

from ...core.grid import CellKind

if TYPE_CHECKING:
    from ...core.grid import Grid


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

GLYPHS: Dict[CellKind, Tuple[str, str]] = {
    CellKind.WALL: ("#", "white"),
    CellKind.START: ("S", "green"),
    CellKind.END: ("E", "red"),
    CellKind.PATH: ("*", "blue"),
    CellKind.PLAIN: (".", "reset"),
}


class TerminalView:
    """Minimal grid viewer using ASCII glyphs and optional ANSI colours."""

    def __init__(self, colour: bool = False) -> None:
        self.colour = colour

    def render_text(self, grid: "Grid") -> str:
        """Return the grid as newline-separated rows, top row first."""

        lines: List[str] = []
        for y in range(grid.height):
            row: List[str] = []
            for x in range(grid.width):
                glyph, colour = GLYPHS[grid.classify(x, y)]
                if self.colour:
                    row.append(f"{_COLOURS[colour]}{glyph}")
                else:
                    row.append(glyph)
            if self.colour:
                row.append(_COLOURS["reset"])
            lines.append("".join(row))
        return "\n".join(lines)

    def render(self, grid: "Grid", stream: TextIO | None = None) -> None:
        """Write :meth:`render_text` output to ``stream`` (stdout by default)."""

        out = stream if stream is not None else sys.stdout
        out.write(self.render_text(grid) + "\n")
        out.flush()


__all__ = ["TerminalView", "GLYPHS"]
