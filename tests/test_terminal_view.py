import io

from grid_astar.core.grid import Grid
from grid_astar.utils.cli.terminal_view import TerminalView


def test_render_text_glyphs():
    grid = Grid.from_layout([
        "S#.",
        ".#.",
        "..E",
    ])
    grid.run()
    assert TerminalView().render_text(grid).splitlines() == [
        "S#.",
        "*#.",
        "**E",
    ]


def test_render_text_round_trips_layout():
    rows = ["S..#", "..#E"]
    assert TerminalView().render_text(Grid.from_layout(rows)).splitlines() == rows


def test_render_with_colour_writes_ansi():
    grid = Grid(2, 1)
    grid.set_start(0, 0)
    out = io.StringIO()
    TerminalView(colour=True).render(grid, out)
    text = out.getvalue()
    assert "\x1b[32mS" in text
    assert text.endswith("\x1b[0m\n")
