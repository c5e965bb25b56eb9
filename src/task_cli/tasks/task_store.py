# src/task_cli/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path

from ..errors import TaskLoadError, TaskSaveError
from .task_models import MAX_TASK_ID, Task, TaskMap

logger = logging.getLogger(__name__)

__all__ = ["TaskMap", "TaskStore"]


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in one JSON object keyed by decimal task id:
    - load() reads everything (missing file -> empty collection)
    - save() rewrites everything via a temp file + os.replace

    The highest id ever assigned is kept in a sibling sequence file
    (`<tasks file>.seq`, `{"lastId": N}`) so deleted ids are never handed out again.
    A missing sequence file means "no id beyond the ones present in the tasks file".

    There is no locking: two processes saving at once means the last writer wins.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._seq_path = self._path.with_name(self._path.name + ".seq")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def seq_path(self) -> Path:
        return self._seq_path

    def load(self) -> TaskMap:
        data = self._read_json(self._path)
        last_id = self._load_last_id()
        if data is None:
            logger.debug("No task file at %s; starting empty.", self._path)
            return TaskMap(last_id=last_id)

        if not isinstance(data, dict):
            raise TaskLoadError(f"cannot parse {self._path}: top level must be a JSON object")

        tasks = TaskMap(last_id=last_id)
        for key, raw in data.items():
            task_id = _key_to_id(key)
            if task_id is None:
                raise TaskLoadError(f"cannot parse {self._path}: invalid task key {key!r}")
            if not isinstance(raw, dict):
                raise TaskLoadError(f"cannot parse {self._path}: task {key} is not an object")
            try:
                task = Task.from_dict(raw)
            except (KeyError, TypeError, ValueError) as exc:
                raise TaskLoadError(f"cannot parse {self._path}: task {key}: {exc}") from exc
            if task.id != task_id:
                raise TaskLoadError(
                    f"cannot parse {self._path}: task {key} has mismatching id {task.id}"
                )
            tasks[task_id] = task

        tasks.last_id = tasks.high_water
        logger.debug("Loaded %d tasks from %s (last_id=%d)", len(tasks), self._path, tasks.last_id)
        return tasks

    def save(self, tasks: TaskMap) -> None:
        last_id = tasks.high_water
        payload = {str(task_id): tasks[task_id].to_dict() for task_id in sorted(tasks)}
        try:
            text = json.dumps(payload, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise TaskSaveError(f"cannot serialize tasks: {exc}") from exc

        # Sequence first: a failure between the two writes can only skip ids, never reuse one.
        self._write_atomic(self._seq_path, json.dumps({"lastId": last_id}))
        self._write_atomic(self._path, text)
        logger.debug("Saved %d tasks to %s (last_id=%d)", len(tasks), self._path, last_id)

    # ---- low-level helpers ----

    def _read_json(self, path: Path) -> object | None:
        try:
            text = path.read_text("utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise TaskLoadError(f"cannot read {path}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise TaskLoadError(f"cannot parse {path}: {exc}") from exc

        try:
            return json.loads(text)
        except ValueError as exc:
            raise TaskLoadError(f"cannot parse {path}: {exc}") from exc

    def _load_last_id(self) -> int:
        data = self._read_json(self._seq_path)
        if data is None:
            return 0
        last_id = data.get("lastId") if isinstance(data, dict) else None
        if isinstance(last_id, bool) or not isinstance(last_id, int) or not 0 <= last_id <= MAX_TASK_ID:
            raise TaskLoadError(f"cannot parse {self._seq_path}: lastId must be an unsigned 32-bit integer")
        return last_id

    @staticmethod
    def _write_atomic(path: Path, text: str) -> None:
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                fh.write(text + "\n")
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
        except (OSError, UnicodeError) as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            reason = getattr(exc, "strerror", None) or exc
            raise TaskSaveError(f"cannot write {path}: {reason}") from exc


def _key_to_id(key: str) -> int | None:
    if not key.isascii() or not key.isdigit():
        return None
    value = int(key)
    if str(value) != key or value > MAX_TASK_ID:
        return None
    return value
