# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything has a working default; a fresh checkout runs without any .env.
- Local data lives under a gitignored directory (.local/todo by default).

Environment variables:
    TODO_APP_NAME     display name (default: todo)
    TODO_LOG_LEVEL    console log level (default: WARNING, keeps the menu readable)
    TODO_DATA_DIR     local data directory (default: .local/todo)
    TODO_TASKS_PATH   task JSON file (default: <data_dir>/todo.json)
    TODO_LOG_DIR      directory for todo.log (default: <data_dir>)
    TODO_LOG_TO_FILE  write the DEBUG log file (default: true)
    TODO_JSON_INDENT  indent of the task file, 0 for compact (default: 2)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path

    # ---- Storage format ----
    json_indent: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "todo.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        json_indent = max(0, _env_int(_k("JSON_INDENT"), 2))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            json_indent=json_indent,
        )


load_dotenv(override=False)

SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
