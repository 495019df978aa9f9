# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasks_cli.core.state import AppState
from tasks_cli.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests away from the real home directory.
    """
    return SimpleNamespace(
        app_name="tasks-cli",
        log_level="WARNING",
        log_dir=None,
        data_file=tmp_path / "tasks.json",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.data_file)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real JSON store in tmp_path.

    NOTE: the file round-trip is part of what we want to test.
    """
    return AppState(settings=settings, task_store=store)
