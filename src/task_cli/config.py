# src/task_cli/config.py

"""Settings loaded from environment variables (+ optional .env).

One Settings object per process; main() accepts an explicit one so tests never
depend on the real environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_CLI"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    prog_name: str
    log_level: str
    log_file: Path | None
    tasks_file: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            prog_name=_env(_k("PROG_NAME"), "task-cli"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_file=_env_optional_path(_k("LOG_FILE")),
            tasks_file=_env_path(_k("TASKS_FILE"), Path("tasks.json")),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
