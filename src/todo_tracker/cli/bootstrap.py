# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the JSON file storage into a TaskStore and returns AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageError
from ..core.state import AppState
from ..storage.json_storage import JsonFileStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    for directory in (settings.data_dir, settings.tasks_path.parent):
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(
                f"Cannot create data directory {directory}: {exc}", path=directory
            ) from exc


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StorageError if the data directory cannot be created or an existing
    task file cannot be read.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = JsonFileStorage(settings.tasks_path, indent=settings.json_indent)
    logger.debug("Using task file %s", storage.path)

    return AppState(settings=settings, task_store=TaskStore(storage))
