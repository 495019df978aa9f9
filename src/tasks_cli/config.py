# src/tasks_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Zero configuration required: every value has a default.
- Consumers accept an injected settings object, so tests never touch the real home dir.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKS_CLI"

DEFAULT_DATA_FILE_NAME = "tasks-cli-storage.json"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str, default: Path) -> Path | None:
    # Set but empty means "disabled".
    raw = os.getenv(name)
    if raw is None:
        return default
    if raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Storage ----
    data_file: Path

    @staticmethod
    def from_env() -> "Settings":
        home = Path.home()

        app_name = _env(_k("APP_NAME"), "tasks-cli").strip() or "tasks-cli"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip() or "WARNING"
        log_dir = _env_optional_path(_k("LOG_DIR"), home / ".local" / "state" / "tasks-cli")

        data_file = _env_path(_k("DATA_FILE"), home / DEFAULT_DATA_FILE_NAME)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            data_file=data_file,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
