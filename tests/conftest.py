# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from duke_assistant.core.dispatcher import Assistant
from duke_assistant.tasks.task_list import TaskList
from duke_assistant.tasks.task_store import TaskFileStore

from .fakes import RecordingTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Duke",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskFileStore:
    """Real file store under tmp_path: its format is part of what we test."""
    return TaskFileStore(settings.tasks_path)


@pytest.fixture()
def repo() -> RecordingTaskRepo:
    return RecordingTaskRepo()


@pytest.fixture()
def assistant(repo: RecordingTaskRepo) -> Assistant:
    return Assistant(TaskList(), repo)
