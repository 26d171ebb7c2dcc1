import pytest

from grid_astar.core.grid import CellKind, Grid
from grid_astar.gui.renderer import CELL_COLOUR_MAP, Renderer
from grid_astar.gui.window import Window


class DummyWindow(Window):
    def __init__(self) -> None:
        self.size = (0, 0)
        self.rects = []
        self.lines = []
        self.text = []
        self.refreshed = 0

    def fill_rect(self, rect, colour) -> None:
        self.rects.append((rect, colour))

    def draw_line(self, start, end, colour) -> None:
        self.lines.append((start, end))

    def draw_text(self, text: str, x: int, y: int, colour=(0, 0, 0)) -> None:
        self.text.append(text)

    def clear(self, colour=(255, 255, 255)) -> None:
        self.rects.clear()

    def refresh(self) -> None:
        self.refreshed += 1


def _grid() -> Grid:
    grid = Grid.from_layout([
        "S#.",
        ".#.",
        "..E",
    ])
    grid.run()
    return grid


def test_renderer_paints_every_cell_by_kind():
    grid = _grid()
    window = DummyWindow()
    Renderer(grid, window, cell_size=10).update()
    colours = {rect[:2]: colour for rect, colour in window.rects}
    assert len(colours) == 9
    assert colours[(0, 0)] == CELL_COLOUR_MAP[CellKind.START]
    assert colours[(10, 0)] == CELL_COLOUR_MAP[CellKind.WALL]
    assert colours[(20, 20)] == CELL_COLOUR_MAP[CellKind.END]
    assert colours[(0, 10)] == CELL_COLOUR_MAP[CellKind.PATH]
    assert colours[(20, 0)] == CELL_COLOUR_MAP[CellKind.PLAIN]
    assert window.refreshed == 1


def test_renderer_draws_grid_lines_and_status():
    window = DummyWindow()
    renderer = Renderer(_grid(), window, cell_size=10)
    renderer.status = "Path: 5 cells"
    renderer.update()
    # 4 vertical and 4 horizontal lines for a 3x3 grid
    assert len(window.lines) == 8
    assert window.text == ["Path: 5 cells"]


def test_screen_to_cell():
    renderer = Renderer(Grid(4, 3), DummyWindow(), cell_size=16)
    assert renderer.screen_to_cell((0, 0)) == (0, 0)
    assert renderer.screen_to_cell((33, 17)) == (2, 1)
    assert renderer.screen_to_cell((64, 0)) is None
    assert renderer.screen_to_cell((0, 48)) is None
    assert renderer.screen_to_cell((-1, 5)) is None


def test_cell_size_must_be_positive():
    with pytest.raises(ValueError):
        Renderer(Grid(1, 1), DummyWindow(), cell_size=0)
