# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskStore depends on this Protocol instead of a concrete backend, so the JSON
file storage can be swapped for an in-memory fake (tests) or any other
implementation that saves and loads the whole collection at once.
"""

from collections.abc import Mapping
from typing import Protocol

from ..tasks.task_models import Task, TaskCollection


class TaskStorage(Protocol):
    """
    Whole-collection persistence.

    - save() replaces everything previously stored.
    - load() returns {} when nothing has been stored yet.
    Both raise StorageError on any other failure.
    """

    def save(self, tasks: Mapping[int, Task]) -> None: ...

    def load(self) -> TaskCollection: ...
