"""Implementations of grid CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, TextIO, Tuple
import logging
import sys

from ...core.errors import GridError
from .. import observer
from ..profiling import profile_runs
from .command_parser import read_commands
from .terminal_view import TerminalView

if TYPE_CHECKING:
    from ...core.grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_PATH = Path("profile.prof")


HELP_TEXT = """Available commands:
  /wall X Y [on|off]  set or clear a wall
  /toggle X Y         flip a wall
  /start X Y          place the start cell
  /end X Y            place the end cell
  /run                search for a path
  /clear              forget the last path
  /reset              remove walls, start, end and path
  /show               print the grid
  /stats              print search statistics
  /profile [N]        profile N searches (default 100)
  /help               show this text
  /quit               leave"""


def _coords(args: Sequence[str]) -> Optional[Tuple[int, int]]:
    if len(args) < 2:
        logger.error("Expected X and Y coordinates, got: %s", " ".join(args) or "nothing")
        return None
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        logger.error("Coordinates must be integers: %s %s", args[0], args[1])
        return None


def _is_endpoint(grid: "Grid", xy: Tuple[int, int]) -> bool:
    if grid.is_start(*xy) or grid.is_end(*xy):
        logger.error("Cannot put a wall on the start or end cell at (%d, %d).", *xy)
        return True
    return False


def _out(state: Dict[str, Any]) -> TextIO:
    return state.get("out") or sys.stdout


def wall(grid: "Grid", args: Sequence[str]) -> None:
    xy = _coords(args)
    if xy is None:
        return
    flag = True
    if len(args) > 2:
        mode = args[2].lower()
        if mode not in ("on", "off"):
            logger.error("Wall mode must be 'on' or 'off', got %s", args[2])
            return
        flag = mode == "on"
    if flag and _is_endpoint(grid, xy):
        return
    grid.set_wall(*xy, flag)
    logger.info("Wall %s at (%d, %d).", "set" if flag else "cleared", *xy)


def toggle(grid: "Grid", args: Sequence[str]) -> None:
    xy = _coords(args)
    if xy is None:
        return
    if not grid.is_wall(*xy) and _is_endpoint(grid, xy):
        return
    flag = grid.toggle_wall(*xy)
    logger.info("Wall at (%d, %d) is now %s.", xy[0], xy[1], "on" if flag else "off")


def place(grid: "Grid", which: str, args: Sequence[str]) -> None:
    """Move the start or end cell, refusing wall cells."""
    xy = _coords(args)
    if xy is None:
        return
    if grid.is_wall(*xy):
        logger.error("Cannot place %s on a wall at (%d, %d).", which, *xy)
        return
    if which == "start":
        grid.set_start(*xy)
    else:
        grid.set_end(*xy)
    logger.info("%s set to (%d, %d).", which.capitalize(), *xy)


def run(grid: "Grid", state: Dict[str, Any]) -> Optional[List[Tuple[int, int]]]:
    grid.run()
    path = grid.path
    if path is not None:
        logger.info("Path found: %d cells.", len(path))
    if state.get("auto_show", True):
        show(grid, state)
    return path


def show(grid: "Grid", state: Dict[str, Any]) -> None:
    view: TerminalView = state.setdefault("view", TerminalView())
    view.render(grid, _out(state))


def profile(grid: "Grid", n_str: str | None = None) -> None:
    try:
        n = int(n_str) if n_str else 100
    except ValueError:
        logger.error("Invalid number of runs: %s", n_str)
        return
    if n <= 0:
        logger.error("Number of runs must be positive.")
        return
    out_path = DEFAULT_PROFILE_PATH
    logger.info("Profiling %s searches. Output to %s", n, out_path)
    stats = profile_runs(grid, n, out_path)
    stats.sort_stats("cumulative").print_stats(10)


def help_command(state: Dict[str, Any]) -> None:
    _out(state).write(HELP_TEXT + "\n")


def execute(command: str, args: list[str], grid: "Grid", state: Dict[str, Any]) -> Any:
    """Run ``command`` against ``grid``.

    Engine errors raised by a command are logged and do not stop the loop.
    """

    if "running" not in state:
        state["running"] = True
    cmd_lower = command.lower()
    return_value: Any = None

    try:
        if cmd_lower == "wall":
            wall(grid, args)
        elif cmd_lower == "toggle":
            toggle(grid, args)
        elif cmd_lower in ("start", "end"):
            place(grid, cmd_lower, args)
        elif cmd_lower == "run":
            return_value = run(grid, state)
        elif cmd_lower == "clear":
            grid.clear_path()
            logger.info("Path cleared.")
        elif cmd_lower == "reset":
            grid.reset()
            logger.info("Grid reset.")
        elif cmd_lower == "show":
            show(grid, state)
        elif cmd_lower == "stats":
            observer.log_stats()
        elif cmd_lower == "profile":
            profile(grid, args[0] if args else None)
        elif cmd_lower == "help":
            help_command(state)
        elif cmd_lower == "quit":
            state["running"] = False
            logger.info("Quit command received.")
        else:
            logger.error("Unknown command: /%s. Type /help for available commands.", command)
    except GridError as exc:
        logger.error("/%s failed: %s", cmd_lower, exc)

    return return_value


def run_command_loop(
    grid: "Grid",
    stream_in: TextIO | None = None,
    stream_out: TextIO | None = None,
) -> Dict[str, Any]:
    """Read commands from ``stream_in`` and apply them until EOF or ``/quit``."""

    state: Dict[str, Any] = {"running": True, "out": stream_out or sys.stdout}
    for cmd in read_commands(stream_in if stream_in is not None else sys.stdin):
        execute(cmd.name, cmd.args, grid, state)
        if not state["running"]:
            break
    return state


__all__ = [
    "wall", "toggle", "place", "run", "show", "profile", "help_command",
    "execute", "run_command_loop", "HELP_TEXT",
]
