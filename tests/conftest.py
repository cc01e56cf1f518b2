# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.state import AppState
from todo_tracker.storage.json_storage import JsonFileStorage
from todo_tracker.tasks.task_store import TaskStore

from .fakes import InMemoryTaskStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "todo.json",
        json_indent=2,
    )


@pytest.fixture()
def memory_storage() -> InMemoryTaskStorage:
    return InMemoryTaskStorage()


@pytest.fixture()
def store(memory_storage: InMemoryTaskStorage) -> TaskStore:
    return TaskStore(memory_storage)


@pytest.fixture()
def json_storage(tmp_path: Path) -> JsonFileStorage:
    return JsonFileStorage(tmp_path / "todo.json")


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with the in-memory storage fake."""
    return AppState(settings=settings, task_store=store)
