# src/duke_assistant/core/dispatcher.py

"""
Command execution.

The Assistant owns the task list for one session. Each call to execute():
- parses the line,
- applies the command to the task list,
- saves through the TaskRepo once per successful mutation (never for reads or failures),
- returns the reply text.

Recoverable failures (bad input, out-of-range numbers, invalid tasks, failed saves)
are always turned into reply text.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import assert_never

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task, TaskKind
from . import replies
from .errors import DispatchError, IndexOutOfRange, StorageError, ValidationError
from .parser import (
    AddBasic,
    AddDeadline,
    AddEvent,
    Command,
    Delete,
    Exit,
    Find,
    Help,
    Invalid,
    ListTasks,
    Mark,
    Unmark,
    parse,
)
from .ports import TaskRepo

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    RUNNING = "running"
    TERMINATED = "terminated"


class Assistant:
    def __init__(self, tasks: TaskList, store: TaskRepo) -> None:
        self._tasks = tasks
        self._store = store
        self._state = SessionState.RUNNING

    @property
    def tasks(self) -> TaskList:
        return self._tasks

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_terminated(self) -> bool:
        return self._state is SessionState.TERMINATED

    def get_response(self, raw_line: str) -> str:
        """Entry point for presentation surfaces."""
        return self.execute(raw_line)

    def execute(self, raw_line: str) -> str:
        if self.is_terminated:
            raise DispatchError("The session has ended; no further input is accepted.")

        command = parse(raw_line)
        logger.debug("Parsed %r -> %r", raw_line, command)
        return self._dispatch(command)

    # ---- per-command handlers ----

    def _dispatch(self, command: Command) -> str:
        if isinstance(command, AddBasic):
            return self._add(lambda: Task.create(command.description, TaskKind.BASIC))
        if isinstance(command, AddDeadline):
            return self._add(
                lambda: Task.create(command.description, TaskKind.DEADLINE, by=command.by)
            )
        if isinstance(command, AddEvent):
            return self._add(
                lambda: Task.create(
                    command.description, TaskKind.EVENT, start=command.start, end=command.end
                )
            )
        if isinstance(command, Mark):
            return self._mark(command.index, done=True)
        if isinstance(command, Unmark):
            return self._mark(command.index, done=False)
        if isinstance(command, Delete):
            return self._delete(command.index)
        if isinstance(command, ListTasks):
            return self._list()
        if isinstance(command, Find):
            return self._find(command.keyword)
        if isinstance(command, Help):
            return replies.HELP_TEXT
        if isinstance(command, Exit):
            self._state = SessionState.TERMINATED
            logger.info("Session terminated by user.")
            return replies.FAREWELL
        if isinstance(command, Invalid):
            logger.debug("Invalid input (%s): %s", command.reason, command.detail)
            return replies.oops(command.detail)
        assert_never(command)

    def _add(self, build: Callable[[], Task]) -> str:
        try:
            task = build()
        except ValidationError as e:
            return replies.oops(str(e))

        count = self._tasks.add(task)
        reply = (
            "Got it. I've added this task:\n"
            f"  {task.to_display_string()}\n"
            f"{replies.count_line(count)}"
        )
        return self._persist(reply)

    def _mark(self, index: int, *, done: bool) -> str:
        try:
            task = self._tasks.mark_at(index, done)
        except IndexOutOfRange as e:
            return replies.oops(str(e))

        header = (
            "Nice! I've marked this task as done:"
            if done
            else "OK, I've marked this task as not done yet:"
        )
        return self._persist(f"{header}\n  {task.to_display_string()}")

    def _delete(self, index: int) -> str:
        try:
            task = self._tasks.remove(index)
        except IndexOutOfRange as e:
            return replies.oops(str(e))

        reply = (
            "Noted. I've removed this task:\n"
            f"  {task.to_display_string()}\n"
            f"{replies.count_line(self._tasks.size())}"
        )
        return self._persist(reply)

    def _list(self) -> str:
        if not self._tasks.size():
            return replies.NO_TASKS
        lines = [t.to_display_string() for t in self._tasks]
        return "Here are the tasks in your list:\n" + replies.numbered(lines)

    def _find(self, keyword: str) -> str:
        matches = self._tasks.find_by_keyword(keyword)
        if not matches:
            return replies.NO_MATCHES
        lines = [t.to_display_string() for t in matches]
        return "Here are the matching tasks in your list:\n" + replies.numbered(lines)

    def _persist(self, reply: str) -> str:
        try:
            self._store.save(self._tasks.snapshot())
        except StorageError as e:
            logger.warning("Saving tasks failed, keeping in-memory state: %s", e)
            return f"{reply}\n{replies.save_failed(str(e))}"
        return reply
