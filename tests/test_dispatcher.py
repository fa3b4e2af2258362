# tests/test_dispatcher.py

from __future__ import annotations

import pytest

from duke_assistant.core import replies
from duke_assistant.core.dispatcher import Assistant, SessionState
from duke_assistant.core.errors import DispatchError
from duke_assistant.tasks.task_list import TaskList
from duke_assistant.tasks.task_store import TaskFileStore

from .fakes import FailingTaskRepo, RecordingTaskRepo


def test_add_todo_echoes_task_and_count(assistant: Assistant, repo: RecordingTaskRepo) -> None:
    reply = assistant.execute("todo read book")

    assert "[T][ ] read book" in reply
    assert "1 task" in reply
    assert assistant.tasks.size() == 1
    assert repo.saves == [["0 | T | read book"]]


def test_mark_and_unmark(assistant: Assistant, repo: RecordingTaskRepo) -> None:
    assistant.execute("todo read book")

    assert "[T][X] read book" in assistant.execute("mark 1")
    assert "[T][ ] read book" in assistant.execute("unmark 1")
    assert len(repo.saves) == 3
    assert repo.saves[1] == ["1 | T | read book"]


def test_add_deadline(assistant: Assistant) -> None:
    reply = assistant.execute("deadline submit report /by 2024-12-01")
    assert "[D][ ] submit report (by: 2024-12-01)" in reply


def test_add_event(assistant: Assistant) -> None:
    reply = assistant.execute("event trip /from 2024-01-05 /to 2024-01-10")
    assert "[E][ ] trip (from: 2024-01-05 to: 2024-01-10)" in reply


def test_delete_out_of_range_keeps_list(assistant: Assistant, repo: RecordingTaskRepo) -> None:
    assistant.execute("todo read book")

    reply = assistant.execute("delete 5")

    assert "does not exist" in reply
    assert "between 1 and 1" in reply
    assert assistant.tasks.size() == 1
    assert len(repo.saves) == 1


def test_huge_task_number_is_an_error_reply(assistant: Assistant, repo: RecordingTaskRepo) -> None:
    assistant.execute("todo read book")

    reply = assistant.execute("delete " + "1" * 5000)

    assert reply.startswith("OOPS!!!")
    assert "not a valid task number" in reply
    assert len(reply) < 500
    assert assistant.tasks.size() == 1
    assert len(repo.saves) == 1


def test_delete_removes_and_reports_count(assistant: Assistant, repo: RecordingTaskRepo) -> None:
    assistant.execute("todo a")
    assistant.execute("todo b")

    reply = assistant.execute("delete 1")

    assert "[T][ ] a" in reply
    assert "Now you have 1 task in the list." in reply
    assert repo.saves[-1] == ["0 | T | b"]


def test_inverted_event_is_a_validation_reply(assistant: Assistant, repo: RecordingTaskRepo) -> None:
    reply = assistant.execute("event trip /from 2024-01-10 /to 2024-01-05")

    assert reply.startswith("OOPS!!!")
    assert "Invalid event time range" in reply
    assert assistant.tasks.size() == 0
    assert repo.saves == []


def test_find(assistant: Assistant) -> None:
    assistant.execute("todo read book")
    assistant.execute("todo buy milk")

    found = assistant.execute("find book")
    assert "[T][ ] read book" in found
    assert "buy milk" not in found

    assert assistant.execute("find xyz") == replies.NO_MATCHES
    assert assistant.execute("find") == replies.NO_MATCHES


def test_list(assistant: Assistant) -> None:
    assert assistant.execute("list") == replies.NO_TASKS

    assistant.execute("todo read book")
    assistant.execute("deadline submit report /by 2024-12-01")

    assert assistant.execute("list") == (
        "Here are the tasks in your list:\n"
        "1.[T][ ] read book\n"
        "2.[D][ ] submit report (by: 2024-12-01)"
    )


def test_reads_and_failures_do_not_persist(assistant: Assistant, repo: RecordingTaskRepo) -> None:
    for line in ["list", "find x", "help", "blah", "todo", "mark abc", "mark 3", "unmark 1"]:
        assistant.execute(line)

    assert repo.saves == []
    assert assistant.tasks.size() == 0


@pytest.mark.parametrize(
    ("line", "fragment"),
    [
        ("blah", "don't know what 'blah' means"),
        ("todo", "description of a todo cannot be empty"),
        ("deadline report", "/by"),
        ("mark x", "not a valid task number"),
    ],
)
def test_invalid_input_replies(assistant: Assistant, line: str, fragment: str) -> None:
    reply = assistant.execute(line)
    assert reply.startswith("OOPS!!!")
    assert fragment in reply


def test_help(assistant: Assistant) -> None:
    assert assistant.execute("help") == replies.HELP_TEXT


def test_bye_terminates_session(assistant: Assistant) -> None:
    assert assistant.state is SessionState.RUNNING

    assert assistant.get_response("bye") == replies.FAREWELL
    assert assistant.is_terminated

    with pytest.raises(DispatchError):
        assistant.execute("list")


def test_save_failure_is_a_warning() -> None:
    repo = FailingTaskRepo()
    assistant = Assistant(TaskList(), repo)

    reply = assistant.execute("todo read book")

    assert "[T][ ] read book" in reply
    assert "could not be saved" in reply
    assert assistant.tasks.size() == 1
    assert repo.attempts == 1
    assert "[T][ ] read book" in assistant.execute("list")


def test_state_survives_restart_through_file_store(store: TaskFileStore) -> None:
    first = Assistant(TaskList(store.load().tasks), store)
    first.execute("todo read book")
    first.execute("event trip /from 2024-01-05 10:00 /to 2024-01-07 18:00")
    first.execute("mark 2")

    second = Assistant(TaskList(store.load().tasks), store)

    assert second.execute("list") == (
        "Here are the tasks in your list:\n"
        "1.[T][ ] read book\n"
        "2.[E][X] trip (from: 2024-01-05 10:00 to: 2024-01-07 18:00)"
    )
