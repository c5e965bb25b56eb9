# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_cli.config import Settings
from task_cli.logging_setup import level_from_name, setup_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TASK_CLI_TASKS_FILE", "TASK_CLI_LOG_LEVEL", "TASK_CLI_LOG_FILE", "TASK_CLI_PROG_NAME"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.tasks_file == Path("tasks.json")
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.prog_name == "task-cli"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_CLI_TASKS_FILE", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_CLI_LOG_FILE", str(tmp_path / "logs" / "task.log"))
    monkeypatch.setenv("TASK_CLI_PROG_NAME", "   ")

    s = Settings.from_env()
    assert s.tasks_file == tmp_path / "mine.json"
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "logs" / "task.log"
    assert s.prog_name == "task-cli"


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("ERROR") == logging.ERROR
    assert level_from_name("chatty") == logging.WARNING


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_file = tmp_path / "logs" / "task.log"
    try:
        setup_logging(console_level=logging.ERROR, log_file=log_file)
        logging.getLogger("task_cli.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "task_cli.test: hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
