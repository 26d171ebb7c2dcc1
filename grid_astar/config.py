"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .systems.search.heuristic import HEURISTICS


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

Coord = Tuple[int, int]


@dataclass
class GridConfig:
    """Initial grid contents."""

    size: Tuple[int, int] = (40, 30)
    start: Optional[Coord] = None
    end: Optional[Coord] = None
    walls: List[Coord] = field(default_factory=list)
    layout: Optional[List[str]] = None


@dataclass
class SearchConfig:
    """Search engine options."""

    heuristic: str = "euclidean"


@dataclass
class GuiConfig:
    """Settings for the pygame window."""

    cell_size: int = 20
    fps: int = 30
    caption: str = "Grid A*"


@dataclass
class LoggingConfig:
    """Log levels applied by :func:`grid_astar.main.configure_logging`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig = field(default_factory=GridConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    gui: GuiConfig = field(default_factory=GuiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _coord(value: Any) -> Optional[Coord]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"expected an [x, y] pair, got {value!r}")
    return int(value[0]), int(value[1])


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    size = grid_data.get("size", [40, 30])
    layout = grid_data.get("layout")
    grid = GridConfig(
        size=(int(size[0]), int(size[1])),
        start=_coord(grid_data.get("start")),
        end=_coord(grid_data.get("end")),
        walls=[_coord(w) for w in grid_data.get("walls") or []],
        layout=[str(row) for row in layout] if layout else None,
    )

    search_data = data.get("search") or {}
    heuristic = str(search_data.get("heuristic", "euclidean")).lower()
    if heuristic not in HEURISTICS:
        raise ValueError(f"unknown heuristic {heuristic!r} in config")
    search = SearchConfig(heuristic=heuristic)

    gui_data = data.get("gui") or {}
    gui = GuiConfig(
        cell_size=int(gui_data.get("cell_size", 20)),
        fps=int(gui_data.get("fps", 30)),
        caption=str(gui_data.get("caption", "Grid A*")),
    )

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    return Config(grid=grid, search=search, gui=gui, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"{path} must contain a mapping at the top level")
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "GuiConfig",
    "LoggingConfig",
    "load_config",
]
