# src/duke_assistant/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the storage medium and the presentation surface swappable and makes
testing easier.
"""

from collections.abc import Iterable
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task
    from ..tasks.task_store import LoadResult


class Sender(StrEnum):
    USER = "user"
    ASSISTANT = "assistant"


class TaskRepo(Protocol):
    """Load-all / save-all bridge between the task list and durable storage."""

    def load(self) -> LoadResult: ...
    def save(self, tasks: Iterable[Task]) -> None: ...


class Renderer(Protocol):
    """Presentation-side port: show one transcript message."""

    def render(self, text: str, sender: Sender) -> None: ...
