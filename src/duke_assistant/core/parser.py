# src/duke_assistant/core/parser.py

"""
Command parser.

Turns one raw input line into exactly one Command. parse() never raises:
sub-parsers raise ParseError and parse() converts it into Invalid.

Range checks on task numbers are not done here; an index that is numeric but
out of range is reported when the command is executed.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_models import When, parse_when
from .errors import ParseError, ParseFailure
from .replies import DEADLINE_USAGE, EVENT_USAGE


@dataclass(frozen=True, slots=True)
class AddBasic:
    description: str


@dataclass(frozen=True, slots=True)
class AddDeadline:
    description: str
    by: When


@dataclass(frozen=True, slots=True)
class AddEvent:
    description: str
    start: When
    end: When


@dataclass(frozen=True, slots=True)
class Mark:
    index: int


@dataclass(frozen=True, slots=True)
class Unmark:
    index: int


@dataclass(frozen=True, slots=True)
class Delete:
    index: int


@dataclass(frozen=True, slots=True)
class ListTasks:
    pass


@dataclass(frozen=True, slots=True)
class Find:
    keyword: str


@dataclass(frozen=True, slots=True)
class Exit:
    pass


@dataclass(frozen=True, slots=True)
class Help:
    pass


@dataclass(frozen=True, slots=True)
class Invalid:
    reason: ParseFailure
    detail: str


Command = (
    AddBasic
    | AddDeadline
    | AddEvent
    | Mark
    | Unmark
    | Delete
    | ListTasks
    | Find
    | Exit
    | Help
    | Invalid
)

_INDEX_RE = re.compile(r"[0-9]+")

# Delimiters only count as whole words: "/by" but not "/bytes".
_BY_RE = re.compile(r"(?:^|(?<=\s))/by(?=\s|$)")
_FROM_RE = re.compile(r"(?:^|(?<=\s))/from(?=\s|$)")
_TO_RE = re.compile(r"(?:^|(?<=\s))/to(?=\s|$)")


def _require_description(keyword: str, text: str) -> str:
    description = text.strip()
    if not description:
        raise ParseError(
            ParseFailure.EMPTY_DESCRIPTION,
            f"The description of a {keyword} cannot be empty.",
        )
    return description


def _parse_date(raw: str, usage: str) -> When:
    try:
        return parse_when(raw)
    except ValueError:
        raise ParseError(
            ParseFailure.BAD_FORMAT,
            f"I don't understand the date '{raw.strip()}'. "
            "Dates look like 2024-12-01 or 2024-12-01 18:00.\n" + usage,
        ) from None


def _parse_todo(rest: str) -> AddBasic:
    return AddBasic(description=_require_description("todo", rest))


def _parse_deadline(rest: str) -> AddDeadline:
    _require_description("deadline", rest)

    by_m = _BY_RE.search(rest)
    if by_m is None:
        raise ParseError(ParseFailure.BAD_FORMAT, "A deadline needs a /by date.\n" + DEADLINE_USAGE)

    description = _require_description("deadline", rest[: by_m.start()])
    by = _parse_date(rest[by_m.end() :], DEADLINE_USAGE)
    return AddDeadline(description=description, by=by)


def _parse_event(rest: str) -> AddEvent:
    _require_description("event", rest)

    from_m = _FROM_RE.search(rest)
    if from_m is None:
        raise ParseError(ParseFailure.BAD_FORMAT, "An event needs a /from date.\n" + EVENT_USAGE)
    to_m = _TO_RE.search(rest, from_m.end())
    if to_m is None:
        raise ParseError(
            ParseFailure.BAD_FORMAT,
            "An event needs a /to date after the /from date.\n" + EVENT_USAGE,
        )

    description = _require_description("event", rest[: from_m.start()])
    start = _parse_date(rest[from_m.end() : to_m.start()], EVENT_USAGE)
    end = _parse_date(rest[to_m.end() :], EVENT_USAGE)
    # start > end is rejected when the task is created.
    return AddEvent(description=description, start=start, end=end)


def _parse_index(keyword: str, rest: str) -> int:
    raw = rest.strip()
    value = 0
    if _INDEX_RE.fullmatch(raw):
        try:
            value = int(raw)
        except ValueError:
            # more digits than int() will convert
            value = 0
    if value < 1:
        shown = raw if len(raw) <= 20 else raw[:20] + "..."
        raise ParseError(
            ParseFailure.BAD_INDEX,
            f"'{shown or 'nothing'}' is not a valid task number. "
            f"Usage: {keyword} <number> (1, 2, 3, ...).",
        )
    return value


def _parse_mark(rest: str) -> Mark:
    return Mark(index=_parse_index("mark", rest))


def _parse_unmark(rest: str) -> Unmark:
    return Unmark(index=_parse_index("unmark", rest))


def _parse_delete(rest: str) -> Delete:
    return Delete(index=_parse_index("delete", rest))


_PARSERS: dict[str, Callable[[str], Command]] = {
    "todo": _parse_todo,
    "deadline": _parse_deadline,
    "event": _parse_event,
    "list": lambda rest: ListTasks(),
    "mark": _parse_mark,
    "unmark": _parse_unmark,
    "delete": _parse_delete,
    "find": lambda rest: Find(keyword=rest),
    "bye": lambda rest: Exit(),
    "help": lambda rest: Help(),
}

KEYWORDS = frozenset(_PARSERS)


def parse(raw_line: str) -> Command:
    line = (raw_line or "").strip()
    parts = line.split(maxsplit=1)
    keyword = parts[0] if parts else ""
    rest = parts[1] if len(parts) > 1 else ""

    handler = _PARSERS.get(keyword)
    if handler is None:
        if not keyword:
            detail = "Please type a command. Type 'help' to see what I can do."
        else:
            detail = f"Sorry, I don't know what '{keyword}' means. Type 'help' to see what I can do."
        return Invalid(reason=ParseFailure.UNKNOWN_COMMAND, detail=detail)

    try:
        return handler(rest)
    except ParseError as e:
        return Invalid(reason=e.reason, detail=e.detail)
