# src/todo_tracker/storage/json_storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..core.errors import StorageError
from ..tasks.task_models import Task, TaskCollection

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    Stores the whole task collection as one JSON object:

        {"1": {"id": 1, "description": "buy milk", "completed": false}, ...}

    Writes go to a sibling .tmp file first and are moved into place with
    os.replace, so the target is either the old or the new content.
    """

    def __init__(self, path: str | Path = "todo.json", *, indent: int | None = 2) -> None:
        self._path = Path(path)
        self._indent = indent or None

    @property
    def path(self) -> Path:
        return self._path

    def save(self, tasks: Mapping[int, Task]) -> None:
        payload = {str(task_id): task.to_dict() for task_id, task in sorted(tasks.items())}
        try:
            data = json.dumps(payload, ensure_ascii=False, indent=self._indent).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Failed to encode tasks: {exc}", path=self._path) from exc

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            os.replace(tmp, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"Failed to write {self._path}: {exc}", path=self._path) from exc

        logger.debug("Saved %d tasks to %s", len(payload), self._path)

    def load(self) -> TaskCollection:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.info("No task file at %s yet, starting empty.", self._path)
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Failed to read {self._path}: {exc}", path=self._path) from exc

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise StorageError(f"Corrupted task file {self._path}: {exc}", path=self._path) from exc

        tasks = self._decode(data)
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def _decode(self, data: Any) -> TaskCollection:
        if not isinstance(data, dict):
            raise self._bad("top-level value must be an object")

        out: TaskCollection = {}
        for key, item in data.items():
            if not isinstance(item, dict):
                raise self._bad(f"task {key} must be an object")

            task_id = item.get("id")
            description = item.get("description")
            completed = item.get("completed")

            # bool is an int subclass; True must not pass as id 1.
            if type(task_id) is not int or task_id <= 0:
                raise self._bad(f"task {key} has id {task_id!r}")
            # Only the canonical key: "01" or " 1" would shadow "1".
            if key != str(task_id):
                raise self._bad(f"invalid task key {key!r} for id {task_id}")
            if not isinstance(description, str) or not description.strip():
                raise self._bad(f"task {key} has no text description")
            if not isinstance(completed, bool):
                raise self._bad(f"task {key} has non-boolean 'completed'")

            out[task_id] = Task(id=task_id, description=description, completed=completed)
        return out

    def _bad(self, detail: str) -> StorageError:
        return StorageError(f"Unexpected content in {self._path}: {detail}", path=self._path)

