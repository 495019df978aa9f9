# src/tasks_cli/cli/presenter.py

"""
Plain-text rendering for the terminal.

Every function here returns a string and has no side effects; printing is the
caller's job. Blocks start and end with a blank line so consecutive outputs in
the interactive loop stay visually separated.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from ..tasks.task_models import Task

RULE = "  " + "─" * 39
WIDE_RULE = "  " + "─" * 51

HELP_ENTRIES: tuple[tuple[str, str], ...] = (
    ("add <task>", "Add a new task"),
    ("display", "Show all pending tasks"),
    ("done <number>", "Mark task as completed"),
    ("delete <number>", "Delete a specific task"),
    ("delete all", "Delete all pending tasks"),
    ("delete archive", "Delete all archived tasks"),
    ("archive", "Show completed tasks"),
    ("location", "Show data file location"),
    ("help", "Show this help message"),
    ("exit", "Exit the program"),
)

DELETE_USAGE = "Usage: delete <number> | delete all | delete archive"


def message(text: str, *details: str) -> str:
    """One-line report, optionally followed by detail lines (usage hints)."""
    lines = ["", f"  {text}"]
    lines.extend(f"  {d}" for d in details)
    lines.append("")
    return "\n".join(lines)


def _local_date_time(ts: str | None) -> tuple[str, str] | None:
    if not ts:
        return None
    try:
        dt = datetime.fromisoformat(ts.replace("Z", "+00:00"))
    except ValueError:
        return None
    local = dt.astimezone()
    return local.strftime("%Y-%m-%d"), local.strftime("%H:%M:%S")


def _block(title: str, body: list[str], total: str) -> str:
    lines = ["", RULE, title.center(len(RULE)).rstrip(), RULE]
    lines.extend(body)
    lines += ["", RULE, f"  {total}", RULE, ""]
    return "\n".join(lines)


def format_pending(tasks: list[Task]) -> str:
    if not tasks:
        return message("No pending tasks! You're all caught up.")

    body: list[str] = []
    for i, task in enumerate(tasks, start=1):
        body += ["", f"   {i}. {task.name}"]
    return _block("PENDING TASKS", body, f"Total: {len(tasks)} task(s)")


def format_archive(tasks: list[Task]) -> str:
    if not tasks:
        return message("No completed tasks in archive.")

    body: list[str] = []
    for i, task in enumerate(tasks, start=1):
        when = _local_date_time(task.completed_at)
        if when is None:
            completed = task.completed_at or "unknown"
        else:
            completed = f"{when[0]} at {when[1]}"
        body += ["", f"   {i}. {task.name}", f"      └─ Completed: {completed}"]
    return _block("COMPLETED TASKS", body, f"Total: {len(tasks)} completed task(s)")


def format_help(app_name: str = "tasks-cli") -> str:
    width = max(len(usage) for usage, _ in HELP_ENTRIES) + 4
    lines = ["", WIDE_RULE, app_name.upper().center(len(WIDE_RULE)).rstrip(), WIDE_RULE]
    lines += ["", "  COMMANDS:", ""]
    lines.extend(f"    {usage:<{width}}{text}" for usage, text in HELP_ENTRIES)
    lines += ["", WIDE_RULE, ""]
    return "\n".join(lines)


def format_location(path: Path, exists: bool) -> str:
    state = "Yes" if exists else "No (will be created on first save)"
    return "\n".join(["", "  Data file location:", f"     {path}", "", f"  File exists: {state}", ""])


def format_added(task: Task, serial: int) -> str:
    return message(f'Task added: "{task.name}"', f"Serial number: {serial}")
