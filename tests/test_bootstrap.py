# tests/test_bootstrap.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskmate.cli import main as cli_main
from taskmate.cli.bootstrap import create_initial_state
from taskmate.config import Settings
from taskmate.core.errors import InvalidFormatError
from taskmate.tasks.task_models import ToDo


def test_create_initial_state_bootstraps_empty_file(settings) -> None:
    state = create_initial_state(settings=settings)
    assert len(state.task_list) == 0
    assert settings.tasks_path.exists()
    assert state.undo_stack == []


def test_create_initial_state_loads_saved_tasks(settings) -> None:
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_text("T | 1 | done already\n", "utf-8")
    state = create_initial_state(settings=settings)
    assert state.task_list.tasks == [ToDo("done already", completed=True)]


def test_corrupted_file_aborts_startup(settings) -> None:
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_text("T | 0 | ok\nZ | 0 | nope\n", "utf-8")
    with pytest.raises(InvalidFormatError):
        create_initial_state(settings=settings)


@pytest.fixture()
def real_settings(tmp_path: Path, monkeypatch) -> Settings:
    settings = Settings(
        app_name="mate",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
        log_path=tmp_path / "data" / "mate.log",
        wrap_width=60,
    )
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    yield settings
    # setup_logging installs file handlers on the root logger; release them.
    for handler in list(logging.getLogger().handlers):
        logging.getLogger().removeHandler(handler)
        handler.close()


def test_main_runs_a_session_with_file_override(real_settings, tmp_path: Path, monkeypatch, capsys) -> None:
    lines = iter(["todo from main", "bye"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    target = tmp_path / "elsewhere" / "mine.txt"

    assert cli_main.main(["--file", str(target)]) == 0

    assert target.read_text("utf-8") == "T | 0 | from main\n"
    out = capsys.readouterr().out
    assert "Hello! I'm mate." in out
    assert "Bye. Hope to see you again soon!" in out


def test_main_exits_with_error_on_corrupted_file(real_settings, capsys) -> None:
    real_settings.tasks_path.parent.mkdir(parents=True)
    real_settings.tasks_path.write_text("T | x | broken\n", "utf-8")

    assert cli_main.main([]) == 1
    assert "Cannot start" in capsys.readouterr().err
    assert real_settings.tasks_path.read_text("utf-8") == "T | x | broken\n"
