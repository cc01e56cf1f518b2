# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Immutable: TaskStore replaces the stored instance on completion, so a Task
    handed out by list_tasks() never changes underneath the caller.
    """

    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "description": self.description, "completed": self.completed}

    def marker(self) -> str:
        return "✓" if self.completed else " "


TaskCollection = dict[int, Task]
