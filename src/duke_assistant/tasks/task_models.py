# src/duke_assistant/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import StrEnum
from typing import assert_never

from ..core.errors import ValidationError

When = date | datetime
# A date-only value or a naive datetime with minute precision.

_DATETIME_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H%M",
)

RECORD_SEPARATOR = " | "


class TaskKind(StrEnum):
    """Task kind. The value is both the display icon and the record tag."""

    BASIC = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_when(text: str) -> When:
    """Parse 'YYYY-MM-DD' or 'YYYY-MM-DD HH:MM' (also 'T' separator / 'HHMM')."""
    raw = text.strip()
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        pass
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date/time: {text!r}")


def format_when(when: When) -> str:
    if isinstance(when, datetime):
        return when.isoformat(sep=" ", timespec="minutes")
    return when.isoformat()


def _as_datetime(when: When) -> datetime:
    if isinstance(when, datetime):
        return when
    return datetime.combine(when, time.min)


@dataclass(frozen=True, slots=True)
class Deadline:
    by: When


@dataclass(frozen=True, slots=True)
class Event:
    start: When
    end: When


Timing = Deadline | Event | None


@dataclass(slots=True)
class Task:
    description: str
    timing: Timing = None
    is_done: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        if name == "description" and hasattr(self, "description"):
            raise AttributeError("Task description cannot be changed after creation")
        object.__setattr__(self, name, value)

    @classmethod
    def create(
        cls,
        description: str,
        kind: TaskKind = TaskKind.BASIC,
        *,
        by: When | None = None,
        start: When | None = None,
        end: When | None = None,
        is_done: bool = False,
    ) -> Task:
        """
        Build a validated task.

        Raises ValidationError for a blank or multi-line description, missing
        fields for the kind, or an event whose start is after its end.
        """
        kind = TaskKind(kind)
        text = (description or "").strip()
        if not text:
            raise ValidationError("The description of a task cannot be empty.")
        if "\n" in text or "\r" in text:
            raise ValidationError("The description of a task must fit on one line.")

        timing: Timing
        if kind is TaskKind.BASIC:
            timing = None
        elif kind is TaskKind.DEADLINE:
            if by is None:
                raise ValidationError("A deadline needs a /by date.")
            timing = Deadline(by=by)
        elif kind is TaskKind.EVENT:
            if start is None or end is None:
                raise ValidationError("An event needs both a /from and a /to date.")
            if _as_datetime(start) > _as_datetime(end):
                raise ValidationError(
                    f"Invalid event time range: start {format_when(start)} "
                    f"is after end {format_when(end)}."
                )
            timing = Event(start=start, end=end)
        else:
            assert_never(kind)

        return cls(description=text, timing=timing, is_done=is_done)

    @property
    def kind(self) -> TaskKind:
        timing = self.timing
        if timing is None:
            return TaskKind.BASIC
        if isinstance(timing, Deadline):
            return TaskKind.DEADLINE
        if isinstance(timing, Event):
            return TaskKind.EVENT
        assert_never(timing)

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    def _status_icon(self) -> str:
        return "X" if self.is_done else " "

    def _when_fields(self) -> list[str]:
        timing = self.timing
        if timing is None:
            return []
        if isinstance(timing, Deadline):
            return [format_when(timing.by)]
        if isinstance(timing, Event):
            return [format_when(timing.start), format_when(timing.end)]
        assert_never(timing)

    def to_display_string(self) -> str:
        text = f"[{self.kind}][{self._status_icon()}] {self.description}"
        fields = self._when_fields()
        if self.kind is TaskKind.DEADLINE:
            text += f" (by: {fields[0]})"
        elif self.kind is TaskKind.EVENT:
            text += f" (from: {fields[0]} to: {fields[1]})"
        return text

    def to_record(self) -> str:
        """One persistence line: '<0|1> | <kind> | <description>[ | <when>...]'."""
        parts = ["1" if self.is_done else "0", str(self.kind), self.description]
        parts.extend(self._when_fields())
        return RECORD_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.to_display_string()
