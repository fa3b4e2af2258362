# src/duke_assistant/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import IndexOutOfRange
from .task_models import Task


class TaskList:
    """
    Ordered, mutable collection of tasks.

    Insertion order is display order and persisted order. Every public index is
    1-based; anything outside [1, size] raises IndexOutOfRange.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._items: list[Task] = list(tasks)

    def _offset(self, index: int) -> int:
        if not 1 <= index <= len(self._items):
            raise IndexOutOfRange(index, len(self._items))
        return index - 1

    def add(self, task: Task) -> int:
        self._items.append(task)
        return len(self._items)

    def get(self, index: int) -> Task:
        return self._items[self._offset(index)]

    def remove(self, index: int) -> Task:
        return self._items.pop(self._offset(index))

    def mark_at(self, index: int, done: bool) -> Task:
        task = self.get(index)
        if done:
            task.mark_done()
        else:
            task.mark_not_done()
        return task

    def find_by_keyword(self, keyword: str) -> list[Task]:
        # A blank keyword matches nothing rather than everything.
        needle = keyword.strip().casefold()
        if not needle:
            return []
        return [t for t in self._items if needle in t.description.casefold()]

    def size(self) -> int:
        return len(self._items)

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._items))
