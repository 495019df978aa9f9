# src/tasks_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- runs the process arguments as one command line and returns, or
- starts the interactive console loop when there are no arguments.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run_single_command(state, args: list[str]) -> None:
    result = command_registry.handle(state, " ".join(args))
    if result.output is not None:
        print(result.output)


def main(argv: list[str] | None = None, *, settings=None) -> None:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)

    logger.debug("Starting %s argv=%r", getattr(settings, "app_name", "tasks-cli"), argv)

    try:
        state = create_initial_state(settings=settings)
        if argv:
            run_single_command(state, argv)
        else:
            run_console_loop(state)
    except Exception as e:
        logger.exception("Unexpected error.")
        print(f"Unexpected error: {e}", file=sys.stderr)


if __name__ == "__main__":
    main()
