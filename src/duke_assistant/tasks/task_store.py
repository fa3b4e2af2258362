# src/duke_assistant/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..core.errors import MalformedRecordError, StorageError, ValidationError
from .task_models import RECORD_SEPARATOR, Task, TaskKind, parse_when

logger = logging.getLogger(__name__)

# Number of trailing date/time fields each kind carries after the description.
_WHEN_FIELDS = {
    TaskKind.BASIC: 0,
    TaskKind.DEADLINE: 1,
    TaskKind.EVENT: 2,
}


def parse_record(line: str) -> Task:
    """
    Inverse of Task.to_record().

    The description may itself contain ' | ', so the kind tag decides how many
    fields are split off the right-hand end.
    """
    head = line.rstrip("\r\n").split(RECORD_SEPARATOR, 2)
    if len(head) != 3:
        raise MalformedRecordError(f"expected '<status> | <kind> | <description>', got {line!r}")

    status, tag, rest = head
    if status not in ("0", "1"):
        raise MalformedRecordError(f"bad status bit {status!r}")
    try:
        kind = TaskKind(tag)
    except ValueError:
        raise MalformedRecordError(f"unknown task kind {tag!r}") from None

    n_when = _WHEN_FIELDS[kind]
    parts = rest.rsplit(RECORD_SEPARATOR, n_when) if n_when else [rest]
    if len(parts) != n_when + 1:
        raise MalformedRecordError(f"kind {tag} needs {n_when} date field(s)")

    description, when_raw = parts[0], parts[1:]
    try:
        whens = [parse_when(w) for w in when_raw]
    except ValueError as e:
        raise MalformedRecordError(str(e)) from None

    try:
        if kind is TaskKind.DEADLINE:
            return Task.create(description, kind, by=whens[0], is_done=status == "1")
        if kind is TaskKind.EVENT:
            return Task.create(
                description, kind, start=whens[0], end=whens[1], is_done=status == "1"
            )
        return Task.create(description, kind, is_done=status == "1")
    except ValidationError as e:
        raise MalformedRecordError(str(e)) from None


@dataclass(slots=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    created: bool = False
    skipped: int = 0


class TaskFileStore:
    """
    Line-oriented task file: one Task.to_record() line per task.

    - load(): missing file is created empty; malformed lines are skipped with a warning
    - save(): full rewrite through a temp file + os.replace
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        if not self._path.exists():
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
            except OSError as e:
                raise StorageError(f"Could not create {self._path}: {e}") from e
            logger.info("Task file %s not found, created an empty one.", self._path)
            return LoadResult(created=True)

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self._path}: {e}") from e

        result = LoadResult()
        # split("\n") rather than splitlines(): descriptions may contain other line breaks.
        for lineno, line in enumerate(raw.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                result.tasks.append(parse_record(line))
            except MalformedRecordError as e:
                result.skipped += 1
                logger.warning("Skipping malformed line %d in %s: %s", lineno, self._path, e)

        logger.info(
            "Loaded %d task(s) from %s (skipped=%d)",
            len(result.tasks),
            self._path,
            result.skipped,
        )
        return result

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [t.to_record() + "\n" for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text("".join(lines), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(f"Could not write {self._path}: {e}") from e
        logger.debug("Saved %d task(s) to %s", len(lines), self._path)
