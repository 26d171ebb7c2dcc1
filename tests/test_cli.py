import io
import logging

from grid_astar.core.grid import Grid
from grid_astar.utils.cli import commands
from grid_astar.utils.cli.command_parser import CLICommand, parse_command, read_commands


def _state():
    return {"out": io.StringIO()}


def test_parse_command_basic():
    cmd = parse_command("/wall 1 2 off")
    assert cmd is not None
    assert cmd.name == "wall"
    assert cmd.args == ["1", "2", "off"]


def test_parse_command_ignores_plain_text():
    assert parse_command("wall 1 2") is None
    assert parse_command("/") is None
    assert parse_command("   ") is None
    assert parse_command("  /RUN  ") == CLICommand(name="run", args=[])


def test_read_commands_skips_non_commands():
    stream = io.StringIO("/start 0 0\nhello\n\n/run\n")
    assert [c.name for c in read_commands(stream)] == ["start", "run"]


def test_wall_and_toggle_commands():
    grid = Grid(3, 3)
    state = _state()
    commands.execute("wall", ["1", "1"], grid, state)
    assert grid.is_wall(1, 1)
    commands.execute("wall", ["1", "1", "off"], grid, state)
    assert not grid.is_wall(1, 1)
    commands.execute("toggle", ["2", "0"], grid, state)
    assert grid.is_wall(2, 0)


def test_start_end_and_run_print_grid():
    grid = Grid(3, 2)
    state = _state()
    commands.execute("start", ["0", "0"], grid, state)
    commands.execute("end", ["2", "1"], grid, state)
    path = commands.execute("run", [], grid, state)
    assert path == grid.path
    assert len(path) == 4
    rows = state["out"].getvalue().splitlines()
    assert len(rows) == 2
    assert rows[0][0] == "S" and rows[1][2] == "E"
    assert sum(row.count("*") for row in rows) == 2


def test_start_on_wall_is_refused(caplog):
    grid = Grid(3, 3)
    grid.set_wall(1, 1, True)
    with caplog.at_level(logging.ERROR):
        commands.execute("start", ["1", "1"], grid, _state())
    assert grid.start is None
    assert "wall" in caplog.text


def test_wall_on_start_or_end_is_refused(caplog):
    grid = Grid(3, 3)
    grid.set_start(0, 0)
    grid.set_end(2, 2)
    state = _state()
    with caplog.at_level(logging.ERROR):
        commands.execute("wall", ["0", "0"], grid, state)
        commands.execute("toggle", ["2", "2"], grid, state)
    assert not grid.is_wall(0, 0)
    assert not grid.is_wall(2, 2)
    assert "start or end" in caplog.text
    commands.execute("wall", ["0", "0", "off"], grid, state)
    commands.execute("wall", ["1", "1"], grid, state)
    assert grid.is_wall(1, 1)


def test_out_of_bounds_is_logged_not_raised(caplog):
    grid = Grid(3, 3)
    with caplog.at_level(logging.ERROR):
        commands.execute("end", ["9", "0"], grid, _state())
        commands.execute("wall", ["-1", "0"], grid, _state())
    assert grid.end is None
    assert "outside the 3x3 grid" in caplog.text


def test_bad_arguments_are_logged(caplog):
    grid = Grid(3, 3)
    with caplog.at_level(logging.ERROR):
        commands.execute("wall", ["a", "b"], grid, _state())
        commands.execute("start", ["1"], grid, _state())
        commands.execute("wall", ["1", "1", "maybe"], grid, _state())
        commands.execute("frobnicate", [], grid, _state())
    assert list(grid.walls()) == []
    assert "integers" in caplog.text
    assert "Unknown command" in caplog.text


def test_run_without_endpoints_is_logged(caplog):
    grid = Grid(3, 3)
    state = _state()
    with caplog.at_level(logging.ERROR):
        assert commands.execute("run", [], grid, state) is None
    assert "start and end" in caplog.text
    assert state["running"] is True


def test_clear_and_reset():
    grid = Grid(3, 3)
    grid.set_start(0, 0)
    grid.set_end(2, 2)
    grid.set_wall(1, 0, True)
    state = _state()
    commands.execute("run", [], grid, state)
    commands.execute("clear", [], grid, state)
    assert grid.path is None
    assert grid.is_wall(1, 0)
    commands.execute("reset", [], grid, state)
    assert grid.start is None and list(grid.walls()) == []


def test_help_and_quit():
    grid = Grid(2, 2)
    state = _state()
    commands.execute("help", [], grid, state)
    assert "/run" in state["out"].getvalue()
    commands.execute("quit", [], grid, state)
    assert state["running"] is False


def test_profile_command_rejects_bad_counts(caplog, monkeypatch):
    grid = Grid(2, 2)
    calls = []
    monkeypatch.setattr(commands, "profile_runs", lambda *a: calls.append(a))
    with caplog.at_level(logging.ERROR):
        commands.execute("profile", ["x"], grid, _state())
        commands.execute("profile", ["0"], grid, _state())
    assert calls == []
    assert "Invalid number of runs" in caplog.text


def test_command_loop_stops_at_quit():
    grid = Grid(4, 4)
    script = io.StringIO(
        "/start 0 0\n"
        "/end 3 0\n"
        "/wall 1 0\n"
        "/run\n"
        "/quit\n"
        "/reset\n"
    )
    out = io.StringIO()
    state = commands.run_command_loop(grid, script, out)
    assert state["running"] is False
    assert grid.start == (0, 0)
    assert len(grid.path) == 6
    assert out.getvalue().splitlines()[0].startswith("S#")
