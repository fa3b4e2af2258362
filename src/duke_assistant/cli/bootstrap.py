# src/duke_assistant/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads the task file and wires TaskList + TaskFileStore into the Assistant.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core import replies
from ..core.dispatcher import Assistant
from ..core.errors import StorageError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import LoadResult, TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def _load_tasks(store: TaskFileStore) -> tuple[LoadResult, list[str]]:
    file_name = store.path.name
    try:
        result = store.load()
    except StorageError:
        # A read failure at startup means "no prior data", not a crash.
        logger.exception("Failed to load tasks from %s", store.path)
        return LoadResult(), [replies.file_unreadable(file_name)]

    notices: list[str] = []
    if result.created:
        notices.append(replies.file_created(file_name))
    else:
        notices.append(replies.file_imported(file_name))
    if result.skipped:
        notices.append(replies.lines_skipped(file_name, result.skipped))
    return result, notices


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskFileStore(settings.tasks_path)
    result, notices = _load_tasks(store)

    return AppState(
        settings=settings,
        assistant=Assistant(TaskList(result.tasks), store),
        notices=notices,
    )
