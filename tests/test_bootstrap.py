# tests/test_bootstrap.py

from __future__ import annotations

from types import SimpleNamespace

from duke_assistant.cli.bootstrap import create_initial_state
from duke_assistant.config import Settings


def test_first_start_creates_task_file(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)

    assert settings.tasks_path.exists()
    assert state.notices == ["tasks.txt not found. File has been created."]
    assert state.assistant.tasks.size() == 0


def test_existing_file_is_imported(settings: SimpleNamespace) -> None:
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_text(
        "1 | T | read book\nnot a record\n0 | D | submit report | 2024-12-01\n", "utf-8"
    )

    state = create_initial_state(settings=settings)

    assert state.notices == [
        "I found a tasks.txt file! Your tasks have been imported.",
        "Skipped 1 unreadable line in tasks.txt.",
    ]
    assert state.assistant.execute("list") == (
        "Here are the tasks in your list:\n"
        "1.[T][X] read book\n"
        "2.[D][ ] submit report (by: 2024-12-01)"
    )


def test_unreadable_file_starts_empty(settings: SimpleNamespace) -> None:
    settings.tasks_path.parent.mkdir(parents=True)
    settings.tasks_path.write_bytes(b"\xff\xfe\xfd")

    state = create_initial_state(settings=settings)

    assert state.notices == ["Could not read tasks.txt. Starting with an empty list."]
    assert state.assistant.tasks.size() == 0


def test_settings_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DUKE_APP_NAME", "Jarvis")
    monkeypatch.setenv("DUKE_LOG_LEVEL", "debug")
    monkeypatch.setenv("DUKE_DATA_DIR", str(tmp_path / "d"))
    monkeypatch.delenv("DUKE_TASKS_PATH", raising=False)
    monkeypatch.delenv("DUKE_LOG_DIR", raising=False)

    s = Settings.from_env()

    assert s.app_name == "Jarvis"
    assert s.log_level == "DEBUG"
    assert s.tasks_path == tmp_path / "d" / "tasks.txt"
    assert s.log_dir == tmp_path / "d"


def test_settings_defaults(monkeypatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "DATA_DIR", "TASKS_PATH", "LOG_DIR"):
        monkeypatch.delenv(f"DUKE_{name}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "Duke"
    assert s.log_level == "WARNING"
    assert s.tasks_path.name == "tasks.txt"
