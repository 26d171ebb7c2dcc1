"""Bootstrap a grid from configuration and start a front end."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import CONFIG, CONFIG_PATH, Config, LoggingConfig, load_config
from .core.grid import Grid
from .systems.search.heuristic import get_heuristic

logger = logging.getLogger(__name__)


def configure_logging(log_config: LoggingConfig) -> None:
    """Apply the global and per-module log levels from ``log_config``."""

    numeric_level = getattr(logging, log_config.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in log_config.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config: Config = CONFIG) -> Grid:
    """Return a :class:`Grid` populated from ``config.grid``."""

    heuristic = get_heuristic(config.search.heuristic)
    grid_cfg = config.grid
    if grid_cfg.layout:
        grid = Grid.from_layout(grid_cfg.layout, heuristic=heuristic)
        logger.info("[Bootstrap] Grid %dx%d built from layout", grid.width, grid.height)
        return grid

    grid = Grid(grid_cfg.size[0], grid_cfg.size[1], heuristic=heuristic)
    grid.set_walls(grid_cfg.walls)
    if grid_cfg.start is not None:
        grid.set_start(*grid_cfg.start)
    if grid_cfg.end is not None:
        grid.set_end(*grid_cfg.end)
    logger.info(
        "[Bootstrap] Grid %dx%d, %d walls, start=%s, end=%s",
        grid.width,
        grid.height,
        len(grid_cfg.walls),
        grid.start,
        grid.end,
    )
    return grid


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="grid-astar", description="A* pathfinding on a grid.")
    parser.add_argument("--config", type=Path, default=CONFIG_PATH, help="YAML configuration file")
    parser.add_argument("--gui", action="store_true", help="open the pygame window instead of the CLI")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(config.logging)
    grid = bootstrap(config)

    if args.gui:
        from .gui.app import run_gui

        run_gui(grid, config.gui)
    else:
        from .utils.cli.commands import run_command_loop

        logger.info("Type /help for commands.")
        run_command_loop(grid)
    return 0


__all__ = ["configure_logging", "bootstrap", "main"]
