# src/todo_tracker/core/errors.py

"""
Error family raised by the task core.

Callers branch on the exception type (or on `.kind`) instead of matching
message strings. `str(err)` is always the human-readable message, so the
console can print it as-is.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class TaskErrorKind(StrEnum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class TaskError(Exception):
    """Base class for every failure reported by TaskStore / TaskStorage."""

    kind: TaskErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(TaskError, ValueError):
    """Caller input failed a precondition (nothing was mutated)."""

    kind = TaskErrorKind.VALIDATION


class NotFoundError(TaskError, LookupError):
    kind = TaskErrorKind.NOT_FOUND

    def __init__(self, task_id: int, message: str | None = None) -> None:
        super().__init__(message or f"Task {task_id} not found")
        self.task_id = task_id


class StorageError(TaskError):
    """Read/write/encode/decode failure in the persistence layer."""

    kind = TaskErrorKind.STORAGE

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
