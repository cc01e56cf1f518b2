# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace

from ..core.errors import NotFoundError, StorageError, ValidationError
from ..core.ports import TaskStorage
from .task_models import Task, TaskCollection

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task collection persisted through a TaskStorage port.

    Every mutation rewrites the whole collection via storage.save() as its last
    step. If that save fails, the in-memory change is rolled back before the
    StorageError propagates, so memory and disk never diverge after a call.

    Ids come from a counter seeded with max(existing id) + 1 and are never
    reissued, even after the newest task is deleted.
    """

    def __init__(self, storage: TaskStorage) -> None:
        self._storage = storage
        self._tasks: TaskCollection = dict(storage.load())
        self._next_id = max(self._tasks, default=0) + 1
        logger.info("TaskStore ready total=%s next_id=%s", len(self._tasks), self._next_id)

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _persist(self) -> None:
        self._storage.save(dict(self._tasks))

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task:
        return self._require(task_id)

    def list_tasks(self) -> list[Task]:
        return [self._tasks[task_id] for task_id in sorted(self._tasks)]

    def add_task(self, description: str) -> int:
        text = (description or "").strip()
        if not text:
            raise ValidationError("description cannot be empty")

        task_id = self._next_id
        self._tasks[task_id] = Task(id=task_id, description=text)
        self._next_id += 1
        try:
            self._persist()
        except StorageError:
            del self._tasks[task_id]
            self._next_id = task_id
            logger.warning("Add rolled back id=%s (save failed)", task_id)
            raise

        logger.debug("Task added id=%s", task_id)
        return task_id

    def complete_task(self, task_id: int) -> None:
        previous = self._require(task_id)
        self._tasks[task_id] = replace(previous, completed=True)
        try:
            self._persist()
        except StorageError:
            self._tasks[task_id] = previous
            logger.warning("Complete rolled back id=%s (save failed)", task_id)
            raise

        logger.debug("Task completed id=%s", task_id)

    def delete_task(self, task_id: int) -> None:
        removed = self._require(task_id)
        del self._tasks[task_id]
        try:
            self._persist()
        except StorageError:
            self._tasks[task_id] = removed
            logger.warning("Delete rolled back id=%s (save failed)", task_id)
            raise

        # _next_id stays put: deleted ids are never reissued.
        logger.debug("Task deleted id=%s", task_id)
