# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import Prompt
from ..cli.commands import registry as command_registry
from ..core.errors import TaskError
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_CHOICES = ("5", "exit", "quit", "q")


def run_console_loop(state: AppState, ask: Prompt = input) -> None:
    """
    Menu REPL: print the menu, read a choice, run it, print the reply.

    Store errors are printed and the loop continues; only an exit choice,
    EOF or Ctrl+C ends it.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())
    menu = command_registry.build_menu(exit_key=EXIT_CHOICES[0])

    while True:
        print(f"\n{menu}")
        try:
            choice = ask(f"\nChoose an option (1-{EXIT_CHOICES[0]}): ").strip()

            if choice.lower() in EXIT_CHOICES:
                logger.info("Console exit command received.")
                print("Goodbye!")
                break

            try:
                reply = command_registry.handle(state, choice, ask)
            except TaskError as e:
                logger.info("Command %r failed (%s): %s", choice, e.kind, e)
                reply = f"Error: {e}"
            except EOFError:
                raise
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling the command."
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        print(reply if reply is not None else "Invalid option, please try again.")

    logger.info("Console connector finished.")
