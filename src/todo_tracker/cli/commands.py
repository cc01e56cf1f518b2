# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task

Prompt = Callable[[str], str]
CommandHandler = Callable[[AppState, Prompt], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Menu registry used by the console connector (1. Add task, 2. List tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = key.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, choice: str, ask: Prompt) -> str | None:
        """
        Run the handler for a menu choice ("1", "add", ...).

        Returns the reply, or None if the choice is unknown.
        TaskError raised by the store propagates to the caller.
        """
        handler = self._handlers.get(choice.strip().lower())
        if handler is None:
            return None
        return handler(state, ask)

    def build_menu(self, exit_key: str | None = None) -> str:
        lines = ["Todo List Menu:"]
        for key, help_text in self._help.items():
            lines.append(f"{key}. {help_text}")
        if exit_key:
            lines.append(f"{exit_key}. Exit")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(raw: str) -> int | None:
    """Positive decimal integer, or None for anything else ("", "-1", "abc", "0")."""
    raw = raw.strip()
    if not raw.isdecimal():
        return None
    task_id = int(raw)
    return task_id if task_id > 0 else None


def format_task(task: Task) -> str:
    return f"{task.id}. [{task.marker()}] {task.description}"


def cmd_add(state: AppState, ask: Prompt) -> str:
    description = ask("Enter task description: ")
    task_id = state.task_store.add_task(description)
    return f"Added task with ID: {task_id}"


def cmd_list(state: AppState, ask: Prompt) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks found."
    return "\n".join(["All tasks:", *(format_task(t) for t in tasks)])


def cmd_complete(state: AppState, ask: Prompt) -> str:
    task_id = parse_task_id(ask("Enter task ID to mark as complete: "))
    if task_id is None:
        return "Invalid ID format"
    state.task_store.complete_task(task_id)
    return f"Marked task {task_id} as complete"


def cmd_delete(state: AppState, ask: Prompt) -> str:
    task_id = parse_task_id(ask("Enter task ID to delete: "))
    if task_id is None:
        return "Invalid ID format"
    state.task_store.delete_task(task_id)
    return f"Deleted task {task_id}"


registry.register("1", cmd_add, help_text="Add task", aliases=["add", "a"])
registry.register("2", cmd_list, help_text="List tasks", aliases=["list", "ls", "l"])
registry.register("3", cmd_complete, help_text="Complete task", aliases=["complete", "done", "c"])
registry.register("4", cmd_delete, help_text="Delete task", aliases=["delete", "rm", "d"])
