# tests/test_main.py

from __future__ import annotations

import json

import pytest

from task_cli.cli.main import main
from task_cli.config import Settings


def test_no_args_prints_usage(settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([], settings=settings) == 0
    out = capsys.readouterr().out
    assert "Usage: task-cli" in out
    assert "mark-in-progress" in out


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_flags(settings: Settings, capsys: pytest.CaptureFixture[str], flag: str) -> None:
    assert main([flag, "ignored"], settings=settings) == 0
    assert "Commands:" in capsys.readouterr().out


def test_invalid_command(settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["frobnicate"], settings=settings) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == 'task-cli: invalid command "frobnicate"\n'


def test_handler_error_goes_to_stderr(settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["delete", "7"], settings=settings) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == 'ERROR: "task-cli delete": task with ID 7 does not exist\n'


def test_corrupt_file_is_reported(settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    settings.tasks_file.write_text("{oops", "utf-8")
    assert main(["list"], settings=settings) == 1
    err = capsys.readouterr().err
    assert err.startswith('ERROR: "task-cli list": cannot parse ')


def test_end_to_end_session(settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["add", "buy milk"], settings=settings) == 0
    assert capsys.readouterr().out == ""

    data = json.loads(settings.tasks_file.read_text("utf-8"))
    assert data["1"]["description"] == "buy milk"
    assert data["1"]["status"] == "todo"
    assert data["1"]["createdAt"] == data["1"]["updatedAt"]

    assert main(["mark-done", "1"], settings=settings) == 0
    data = json.loads(settings.tasks_file.read_text("utf-8"))
    assert data["1"]["status"] == "done"

    assert main(["list", "done"], settings=settings) == 0
    assert capsys.readouterr().out == (
        "ID        STATUS         DESCRIPTION\n"
        "1         done           buy milk  \n"
    )

    assert main(["delete", "1"], settings=settings) == 0
    assert capsys.readouterr().out == '"buy milk" deleted\n'

    assert main(["add", "eggs"], settings=settings) == 0
    assert list(json.loads(settings.tasks_file.read_text("utf-8"))) == ["2"]


def test_custom_prog_name(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    settings = Settings(prog_name="todo", log_level="WARNING", log_file=None, tasks_file=tmp_path / "t.json")
    assert main(["nope"], settings=settings) == 1
    assert capsys.readouterr().err == 'todo: invalid command "nope"\n'


def test_undecodable_argv_bytes_are_stored_replaced(settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    # b"caf\xff" as decoded by Python from a non-UTF-8 argv
    assert main(["add", "caf\udcff"], settings=settings) == 0
    data = json.loads(settings.tasks_file.read_text("utf-8"))
    assert data["1"]["description"] == "caf�"
    assert not list(settings.tasks_file.parent.glob("*.tmp"))

    assert main(["update", "1", "th\udce9"], settings=settings) == 0
    assert capsys.readouterr().out == 'Updated: "caf�" -> "th�"\n'

    assert main(["delete", "\udcff"], settings=settings) == 1
    assert capsys.readouterr().err == 'ERROR: "task-cli delete": invalid task ID "�"\n'
