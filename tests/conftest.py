# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_cli.config import Settings
from task_cli.core.state import AppState
from task_cli.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test task file; never reads the real environment."""
    return Settings(
        prog_name="task-cli",
        log_level="WARNING",
        log_file=None,
        tasks_file=tmp_path / "tasks.json",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(settings: Settings) -> TaskStore:
    return TaskStore(settings.tasks_file)


@pytest.fixture()
def state(settings: Settings, store: TaskStore, clock: FakeClock) -> AppState:
    return AppState(settings=settings, task_store=store, clock=clock)
