# tests/test_presenter.py

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from tasks_cli.cli import presenter
from tasks_cli.tasks.task_models import Task


def test_pending_block_numbers_from_one() -> None:
    tasks = [Task(id=5, name="Buy milk", created_at="x"), Task(id=9, name="Pay rent", created_at="x")]
    out = presenter.format_pending(tasks)

    assert "PENDING TASKS" in out
    assert "1. Buy milk" in out
    assert "2. Pay rent" in out
    assert "Total: 2 task(s)" in out
    # stored ids are never shown as serials
    assert "5." not in out


def test_archive_shows_local_completion_time() -> None:
    ts = "2026-10-18T09:15:02.113Z"
    task = Task(id=1, name="Buy milk", created_at=ts, completed=True, completed_at=ts)
    local = datetime(2026, 10, 18, 9, 15, 2, 113000, tzinfo=timezone.utc).astimezone()

    out = presenter.format_archive([task])
    assert "COMPLETED TASKS" in out
    assert "1. Buy milk" in out
    assert f"Completed: {local:%Y-%m-%d} at {local:%H:%M:%S}" in out
    assert "Total: 1 completed task(s)" in out


def test_archive_falls_back_to_raw_timestamp() -> None:
    task = Task(id=1, name="x", created_at="", completed=True, completed_at="yesterday")
    assert "Completed: yesterday" in presenter.format_archive([task])


def test_empty_messages() -> None:
    assert "No pending tasks! You're all caught up." in presenter.format_pending([])
    assert "No completed tasks in archive." in presenter.format_archive([])


def test_help_uses_app_name_and_aligns_descriptions() -> None:
    out = presenter.format_help("my-tasks")
    assert "MY-TASKS" in out
    lines = out.splitlines()
    columns = set()
    for usage, text in presenter.HELP_ENTRIES:
        row = next(line for line in lines if line.startswith(f"    {usage} "))
        columns.add(row.index(text))
    assert len(columns) == 1


def test_location() -> None:
    path = Path("/tmp/tasks.json")
    assert "File exists: Yes" in presenter.format_location(path, True)
    missing = presenter.format_location(path, False)
    assert str(path) in missing
    assert "will be created on first save" in missing


def test_message_with_details() -> None:
    out = presenter.message("Oops", "Usage: x")
    assert out.splitlines() == ["", "  Oops", "  Usage: x"]
