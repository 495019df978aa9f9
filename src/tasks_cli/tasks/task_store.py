# tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from .task_models import TaskData

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole TaskData document is read and written on every call:
    - load() never raises; a missing or unreadable file yields an empty document
    - save() replaces the file atomically and reports failure through its return value

    There is no locking; the last writer wins.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        logger.debug("TaskStore ready path=%s exists=%s", self._path, self.exists())

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> TaskData:
        if not self._path.exists():
            return TaskData()

        try:
            raw = json.loads(self._path.read_text("utf-8"))
            data = TaskData.from_dict(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            logger.warning("Error loading tasks from %s, starting fresh: %s", self._path, e)
            return TaskData()
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed task file %s, starting fresh: %s", self._path, e)
            return TaskData()

        logger.debug("Loaded %d tasks from %s", len(data.tasks), self._path)
        return data

    def save(self, data: TaskData) -> bool:
        # Write a sibling file first; the old document survives a failed write.
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data.to_dict(), ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Error saving tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False

        logger.debug("Saved %d tasks to %s", len(data.tasks), self._path)
        return True
