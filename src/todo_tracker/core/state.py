# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state so front-end code never reads config globals.
    settings: object
    task_store: TaskStore
