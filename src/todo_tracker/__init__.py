"""
todo_tracker: a single-user task tracker with durable JSON persistence.

The core is TaskStore (tasks/task_store.py) persisting through the
TaskStorage port (core/ports.py); JsonFileStorage is the default backend.
"""

from .core.errors import NotFoundError, StorageError, TaskError, TaskErrorKind, ValidationError
from .storage.json_storage import JsonFileStorage
from .tasks.task_models import Task, TaskCollection
from .tasks.task_store import TaskStore

__version__ = "0.1.0"

__all__ = [
    "JsonFileStorage",
    "NotFoundError",
    "StorageError",
    "Task",
    "TaskCollection",
    "TaskError",
    "TaskErrorKind",
    "TaskStore",
    "ValidationError",
]
