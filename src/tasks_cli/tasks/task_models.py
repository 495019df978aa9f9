# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def utc_now_iso() -> str:
    """UTC timestamp like '2026-10-18T09:15:02.113Z' (sorts lexicographically)."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _flag(raw: dict[str, Any], key: str) -> bool:
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{key!r} must be true or false, got {value!r}")
    return value


@dataclass(slots=True)
class Task:
    """
    One entry of the task list.

    Notes:
    - `id` is assigned once from TaskData.next_id and never reused.
    - `hidden` is a soft delete: the record stays in storage forever.
    - JSON keys are camelCase; optional timestamps are omitted when unset.
    """

    id: int
    name: str
    created_at: str
    completed: bool = False
    hidden: bool = False
    completed_at: str | None = None
    hidden_at: str | None = None

    @property
    def is_pending(self) -> bool:
        return not self.completed and not self.hidden

    @property
    def is_archived(self) -> bool:
        return self.completed and not self.hidden

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "completed": self.completed,
            "hidden": self.hidden,
            "createdAt": self.created_at,
        }
        if self.completed_at is not None:
            out["completedAt"] = self.completed_at
        if self.hidden_at is not None:
            out["hiddenAt"] = self.hidden_at
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """Raises ValueError/TypeError/KeyError on a malformed record."""
        if not isinstance(raw, dict):
            raise TypeError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw["id"]
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"task id must be an integer, got {task_id!r}")

        completed_at = raw.get("completedAt")
        hidden_at = raw.get("hiddenAt")
        return cls(
            id=task_id,
            name=str(raw["name"]),
            created_at=str(raw.get("createdAt") or ""),
            completed=_flag(raw, "completed"),
            hidden=_flag(raw, "hidden"),
            completed_at=str(completed_at) if completed_at is not None else None,
            hidden_at=str(hidden_at) if hidden_at is not None else None,
        )


@dataclass(slots=True)
class TaskData:
    """The whole persisted document: every task ever created plus the id counter."""

    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "nextId": self.next_id,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> TaskData:
        if not isinstance(raw, dict):
            raise TypeError(f"task document must be an object, got {type(raw).__name__}")

        raw_tasks = raw.get("tasks", [])
        if not isinstance(raw_tasks, list):
            raise TypeError("'tasks' must be a list")
        tasks = [Task.from_dict(item) for item in raw_tasks]

        ids = [t.id for t in tasks]
        if len(set(ids)) != len(ids):
            raise ValueError("duplicate task ids")

        next_id = raw.get("nextId", 1)
        if not isinstance(next_id, int) or isinstance(next_id, bool):
            raise ValueError(f"nextId must be an integer, got {next_id!r}")

        # nextId must stay above every id ever handed out.
        next_id = max(next_id, max(ids, default=0) + 1, 1)
        return cls(tasks=tasks, next_id=next_id)
