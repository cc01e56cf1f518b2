# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loads the task file), then runs the
console menu in the main thread until the user exits.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import StorageError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.log_dir if settings.log_to_file else None
    try:
        setup_logging(log_dir=log_dir, console_level=console_level)
    except OSError as e:
        print(f"Error: cannot open log file in {log_dir}: {e}", file=sys.stderr)
        return 1

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except StorageError as e:
        logger.error("Cannot load tasks: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
