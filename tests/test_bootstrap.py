# tests/test_bootstrap.py

from __future__ import annotations

import logging

import pytest

from todo_tracker.cli import main as cli_main
from todo_tracker.cli.bootstrap import create_initial_state
from todo_tracker.core.errors import StorageError
from todo_tracker.logging_setup import setup_logging


def test_create_initial_state_first_run(settings) -> None:
    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert state.task_store.list_tasks() == []

    state.task_store.add_task("buy milk")
    assert settings.tasks_path.exists()

    reopened = create_initial_state(settings=settings)
    assert [t.description for t in reopened.task_store.list_tasks()] == ["buy milk"]


def test_create_initial_state_rejects_corrupted_file(settings) -> None:
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_text("garbage", "utf-8")

    with pytest.raises(StorageError):
        create_initial_state(settings=settings)


def test_setup_logging_writes_log_file(tmp_path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        setup_logging(log_dir=tmp_path, console_level=logging.ERROR)
        logging.getLogger("todo_tracker.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "todo.log").read_text("utf-8")
    finally:
        logging.captureWarnings(False)
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    saved = list(root.handlers)
    yield
    logging.captureWarnings(False)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved:
        root.addHandler(h)


def test_create_initial_state_unwritable_data_dir(settings) -> None:
    # A regular file where the data directory should be.
    settings.data_dir.parent.mkdir(parents=True, exist_ok=True)
    settings.data_dir.write_text("", "utf-8")

    with pytest.raises(StorageError, match="Cannot create data directory") as exc_info:
        create_initial_state(settings=settings)

    assert exc_info.value.path == settings.data_dir
    assert isinstance(exc_info.value.__cause__, OSError)


def test_main_reports_unwritable_data_dir(
    settings, monkeypatch: pytest.MonkeyPatch, capsys, restore_root_logging
) -> None:
    settings.data_dir.parent.mkdir(parents=True, exist_ok=True)
    settings.data_dir.write_text("", "utf-8")
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)

    assert cli_main.main() == 1
    assert "Error: Cannot create data directory" in capsys.readouterr().err


def test_main_reports_unwritable_log_dir(
    settings, monkeypatch: pytest.MonkeyPatch, capsys, restore_root_logging
) -> None:
    settings.log_dir.write_text("", "utf-8")
    settings.log_to_file = True
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)

    assert cli_main.main() == 1
    assert "Error: cannot open log file" in capsys.readouterr().err
