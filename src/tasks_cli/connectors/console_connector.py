# src/tasks_cli/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli import presenter
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "  ➜ "


def run_console_loop(state: AppState) -> None:
    """Interactive mode: help first, then one command per line until exit or EOF."""
    logger.info("Console started (data_file=%s).", state.task_store.path)
    app_name = str(getattr(state.settings, "app_name", "tasks-cli"))
    print(presenter.format_help(app_name))

    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        try:
            result = command_registry.handle(state, line)
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt during a command, exiting.")
            print()
            break
        except Exception:
            logger.exception("Command handler crashed.")
            print(presenter.message("Internal error while handling a command."))
            continue

        if result.output is not None:
            print(result.output)

        if not result.keep_running:
            logger.info("Console exit command received.")
            break

    logger.info("Console finished.")
