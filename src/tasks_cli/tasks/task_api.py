# src/tasks_cli/tasks/task_api.py

"""
Views and mutations over an in-memory TaskData.

Serial numbers are 1-based positions inside a filtered view. They are derived
from the current task list on every call and are never stored: after any
delete the serials of the remaining tasks shift.

Nothing here touches the disk; callers load and save through TaskStore.
"""

from __future__ import annotations

import logging
import re

from .task_models import Task, TaskData, utc_now_iso

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")


class InvalidSerialError(ValueError):
    """A serial number that is not an integer or is outside the current view."""

    def __init__(self, raw: object, message: str = "Invalid task number!") -> None:
        super().__init__(message)
        self.raw = raw


def pending_tasks(data: TaskData) -> list[Task]:
    return [t for t in data.tasks if t.is_pending]


def archived_tasks(data: TaskData) -> list[Task]:
    return [t for t in data.tasks if t.is_archived]


def parse_serial(raw: str) -> int:
    text = (raw or "").strip()
    if not _INT_RE.fullmatch(text):
        raise InvalidSerialError(raw, "Please provide a valid task number!")
    return int(text)


def resolve_serial(view: list[Task], serial: int) -> Task:
    if serial < 1 or serial > len(view):
        raise InvalidSerialError(serial)
    return view[serial - 1]


def add_task(data: TaskData, name: str, *, now: str | None = None) -> tuple[Task, int]:
    """
    Append a new pending task.

    Returns the task and its serial number in the pending view, which is the
    pending count after insertion since new tasks always go last.
    """
    clean = (name or "").strip()
    if not clean:
        raise ValueError("task name is required")

    task = Task(id=data.next_id, name=clean, created_at=now or utc_now_iso())
    data.tasks.append(task)
    data.next_id += 1

    serial = len(pending_tasks(data))
    logger.debug("Added task id=%s serial=%s", task.id, serial)
    return task, serial


def complete_task(data: TaskData, serial: int, *, now: str | None = None) -> Task:
    task = resolve_serial(pending_tasks(data), serial)
    task.completed = True
    task.completed_at = now or utc_now_iso()
    logger.debug("Completed task id=%s", task.id)
    return task


def _hide(task: Task, now: str) -> None:
    task.hidden = True
    task.hidden_at = now


def hide_task(data: TaskData, serial: int, *, now: str | None = None) -> Task:
    task = resolve_serial(pending_tasks(data), serial)
    _hide(task, now or utc_now_iso())
    logger.debug("Hid task id=%s", task.id)
    return task


def hide_all_pending(data: TaskData, *, now: str | None = None) -> int:
    ts = now or utc_now_iso()
    victims = pending_tasks(data)
    for task in victims:
        _hide(task, ts)
    logger.debug("Hid %d pending tasks", len(victims))
    return len(victims)


def hide_all_archived(data: TaskData, *, now: str | None = None) -> int:
    ts = now or utc_now_iso()
    victims = archived_tasks(data)
    for task in victims:
        _hide(task, ts)
    logger.debug("Hid %d archived tasks", len(victims))
    return len(victims)
