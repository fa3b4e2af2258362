# src/duke_assistant/core/replies.py

from __future__ import annotations

from typing import Final

GREETING: Final[str] = "Hello, I'm Duke!\nWhat can I do for you?"
FAREWELL: Final[str] = "Bye. Hope to see you again soon!"

NO_TASKS: Final[str] = "You have no tasks in your list."
NO_MATCHES: Final[str] = "No matching tasks found."

INTERNAL_ERROR: Final[str] = "Internal error while handling that command."

HELP_TEXT: Final[str] = """
Here is what I understand:
  todo <description>
  deadline <description> /by <date>
  event <description> /from <date> /to <date>
  list
  mark <number> | unmark <number> | delete <number>
  find <keyword>
  bye
Dates look like 2024-12-01 or 2024-12-01 18:00.
""".strip()

DEADLINE_USAGE: Final[str] = "Please use: deadline <description> /by <date>"
EVENT_USAGE: Final[str] = "Please use: event <description> /from <date> /to <date>"


def count_line(n: int) -> str:
    noun = "task" if n == 1 else "tasks"
    return f"Now you have {n} {noun} in the list."


def numbered(lines: list[str]) -> str:
    return "\n".join(f"{i}.{line}" for i, line in enumerate(lines, start=1))


def oops(message: str) -> str:
    return f"OOPS!!! {message}"


def file_created(file_name: str) -> str:
    return f"{file_name} not found. File has been created."


def file_imported(file_name: str) -> str:
    return f"I found a {file_name} file! Your tasks have been imported."


def lines_skipped(file_name: str, n: int) -> str:
    noun = "line" if n == 1 else "lines"
    return f"Skipped {n} unreadable {noun} in {file_name}."


def file_unreadable(file_name: str) -> str:
    return f"Could not read {file_name}. Starting with an empty list."


def save_failed(reason: str) -> str:
    return f"Warning: your tasks could not be saved ({reason}). Changes are kept for this session."
