# src/tasks_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_api import InvalidSerialError
from . import presenter

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    output: str | None
    keep_running: bool = True


class CommandRegistry:
    """Command-word registry shared by the single-command mode and the console loop."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._stoppers: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        aliases: list[str] | None = None,
        stops_session: bool = False,
    ) -> None:
        aliases = aliases or []
        for key in [name, *aliases]:
            key = key.lower()
            self._handlers[key] = handler
            if stops_session:
                self._stoppers.add(key)

    def handle(self, state: AppState, line: str) -> CommandResult:
        """
        Handle a line like "done 2".
        Blank input is a no-op; only stop commands end the session.
        """
        parts = line.split()
        if not parts:
            return CommandResult(None)

        name = parts[0].lower()
        args = " ".join(parts[1:])

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command %r", name)
            return CommandResult(
                presenter.message(
                    f'Unknown command: "{name}"', "Type 'help' to see available commands."
                )
            )

        output = handler(state, args)
        return CommandResult(output, keep_running=name not in self._stoppers)


registry = CommandRegistry()


def _save_failed() -> str:
    return presenter.message(
        "Could not save tasks; the change was not stored.", "See the log for details."
    )


def cmd_add(state: AppState, args: str) -> str:
    if not args.strip():
        return presenter.message("Please provide a task name!", "Usage: add <task name>")

    data = state.task_store.load()
    task, serial = task_api.add_task(data, args)
    if not state.task_store.save(data):
        return _save_failed()
    logger.info("Task added id=%s serial=%s", task.id, serial)
    return presenter.format_added(task, serial)


def cmd_done(state: AppState, args: str) -> str:
    try:
        serial = task_api.parse_serial(args)
    except InvalidSerialError as e:
        return presenter.message(str(e), "Usage: done <number>")

    data = state.task_store.load()
    try:
        task = task_api.complete_task(data, serial)
    except InvalidSerialError as e:
        return presenter.message(str(e))

    if not state.task_store.save(data):
        return _save_failed()
    logger.info("Task completed id=%s", task.id)
    return presenter.message(f'Completed: "{task.name}"')


def cmd_delete(state: AppState, args: str) -> str:
    """
    delete <number>   -> hide one pending task
    delete all        -> hide every pending task
    delete archive    -> hide every archived task
    """
    target = args.strip().lower()
    if not target:
        return presenter.message("Please provide what to delete!", presenter.DELETE_USAGE)

    data = state.task_store.load()

    if target in ("all", "archive"):
        if target == "all":
            count = task_api.hide_all_pending(data)
            kind = "pending"
        else:
            count = task_api.hide_all_archived(data)
            kind = "archived"
        if count and not state.task_store.save(data):
            return _save_failed()
        logger.info("Deleted %d %s tasks", count, kind)
        return presenter.message(f"Deleted {count} {kind} task(s).")

    try:
        serial = task_api.parse_serial(target)
    except InvalidSerialError:
        return presenter.message("Invalid input!", presenter.DELETE_USAGE)

    try:
        task = task_api.hide_task(data, serial)
    except InvalidSerialError as e:
        return presenter.message(str(e))

    if not state.task_store.save(data):
        return _save_failed()
    logger.info("Task deleted id=%s", task.id)
    return presenter.message(f'Deleted: "{task.name}"')


def cmd_display(state: AppState, args: str) -> str:
    return presenter.format_pending(task_api.pending_tasks(state.task_store.load()))


def cmd_archive(state: AppState, args: str) -> str:
    return presenter.format_archive(task_api.archived_tasks(state.task_store.load()))


def cmd_location(state: AppState, args: str) -> str:
    store = state.task_store
    return presenter.format_location(store.path, store.exists())


def cmd_help(state: AppState, args: str) -> str:
    app_name = str(getattr(state.settings, "app_name", "tasks-cli"))
    return presenter.format_help(app_name)


def cmd_exit(state: AppState, args: str) -> str:
    return presenter.message("Goodbye!")


registry.register("add", cmd_add)
registry.register("done", cmd_done)
registry.register("delete", cmd_delete)
registry.register("display", cmd_display, aliases=["list", "show"])
registry.register("archive", cmd_archive)
registry.register("location", cmd_location)
registry.register("help", cmd_help, aliases=["h", "?"])
registry.register("exit", cmd_exit, aliases=["quit", "q"], stops_session=True)
