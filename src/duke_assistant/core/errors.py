# src/duke_assistant/core/errors.py

"""
Error taxonomy of the assistant core.

None of these are fatal for an interactive session: the dispatcher turns every one
of them into reply text, except DispatchError which signals a caller contract
violation (input after the session has ended).
"""

from __future__ import annotations

from enum import StrEnum


class DukeError(Exception):
    """Base class for all assistant errors."""


class ParseFailure(StrEnum):
    UNKNOWN_COMMAND = "unknown_command"
    EMPTY_DESCRIPTION = "empty_description"
    BAD_FORMAT = "bad_format"
    BAD_INDEX = "bad_index"


class ParseError(DukeError):
    def __init__(self, reason: ParseFailure, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason
        self.detail = detail


class ValidationError(DukeError):
    """A task could not be created from the given fields."""


class IndexOutOfRange(DukeError):
    def __init__(self, index: int, size: int) -> None:
        if size == 0:
            msg = f"Task {index} does not exist. Your list is empty."
        else:
            msg = f"Task {index} does not exist. Please choose a number between 1 and {size}."
        super().__init__(msg)
        self.index = index
        self.size = size


class StorageError(DukeError):
    """Reading or writing the task file failed."""


class MalformedRecordError(StorageError):
    """A persisted line could not be turned back into a task."""


class DispatchError(DukeError):
    """The assistant cannot accept this input at all (e.g. after 'bye')."""
