import logging

import pytest

from grid_astar import main as main_module
from grid_astar.config import Config, GridConfig, LoggingConfig, SearchConfig
from grid_astar.systems.search.heuristic import manhattan


def test_bootstrap_from_fields():
    cfg = Config(grid=GridConfig(size=(6, 4), start=(0, 0), end=(5, 3), walls=[(2, 0), (2, 1)]))
    grid = main_module.bootstrap(cfg)
    assert grid.size == (6, 4)
    assert grid.start == (0, 0) and grid.end == (5, 3)
    assert list(grid.walls()) == [(2, 0), (2, 1)]
    grid.run()
    assert len(grid.path) == 9


def test_bootstrap_from_layout_and_heuristic():
    cfg = Config(
        grid=GridConfig(size=(99, 99), layout=["S..", ".#.", "..E"]),
        search=SearchConfig(heuristic="manhattan"),
    )
    grid = main_module.bootstrap(cfg)
    assert grid.size == (3, 3)
    assert grid.heuristic is manhattan
    assert grid.is_wall(1, 1)


def test_bootstrap_rejects_out_of_bounds_walls():
    from grid_astar.core.errors import OutOfBounds

    cfg = Config(grid=GridConfig(size=(2, 2), walls=[(5, 5)]))
    with pytest.raises(OutOfBounds):
        main_module.bootstrap(cfg)


def test_configure_logging_levels(monkeypatch):
    name = "grid_astar.tests.configure_logging"
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    try:
        main_module.configure_logging(
            LoggingConfig(global_level="WARNING", module_levels={name: "debug", name + ".bad": "LOUD"})
        )
        assert calls[0]["level"] == logging.WARNING
        assert calls[0]["force"] is True
        assert logging.getLogger(name).level == logging.DEBUG
        assert logging.getLogger(name + ".bad").level == logging.NOTSET
    finally:
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_main_runs_cli(tmp_path, monkeypatch):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        'grid:\n  layout:\n    - "S.."\n    - "##."\n    - "E.."\n'
        "logging:\n  global_level: ERROR\n"
    )
    captured = {}

    def fake_loop(grid):
        grid.run()
        captured["path"] = grid.path

    from grid_astar.utils.cli import commands

    monkeypatch.setattr(commands, "run_command_loop", fake_loop)
    monkeypatch.setattr(main_module, "configure_logging", lambda cfg: None)
    assert main_module.main(["--config", str(cfg_path)]) == 0
    assert captured["path"] == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2)]


def test_main_gui_flag(tmp_path, monkeypatch):
    from grid_astar.gui import app

    calls = []
    monkeypatch.setattr(app, "run_gui", lambda grid, gui_cfg: calls.append((grid.size, gui_cfg.cell_size)))
    monkeypatch.setattr(main_module, "configure_logging", lambda cfg: None)
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("grid:\n  size: [7, 3]\ngui:\n  cell_size: 8\n")
    assert main_module.main(["--config", str(cfg_path), "--gui"]) == 0
    assert calls == [((7, 3), 8)]
