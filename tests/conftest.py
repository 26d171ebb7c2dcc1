import os

import pytest

# pygame must never try to open a real display or audio device under test.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from grid_astar.core.grid import Grid
from grid_astar.utils import observer


@pytest.fixture(autouse=True)
def _clear_observer():
    observer.clear()
    yield
    observer.clear()


@pytest.fixture
def open_grid() -> Grid:
    """5x5 grid without walls, start (0, 0) and end (4, 4)."""
    grid = Grid(5, 5)
    grid.set_start(0, 0)
    grid.set_end(4, 4)
    return grid
