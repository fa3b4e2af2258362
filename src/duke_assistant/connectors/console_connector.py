# src/duke_assistant/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..core import replies
from ..core.ports import Renderer, Sender
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    if sys.stdout.isatty():
        sys.stdout.write("\033[1A\033[2K\r")
        sys.stdout.write(line + "\n")
        sys.stdout.flush()
    else:
        print(line)


class ConsoleRenderer:
    """Prints the chat transcript with local timestamps."""

    def __init__(self, app_name: str = "Duke") -> None:
        self.app_name = app_name

    def render(self, text: str, sender: Sender) -> None:
        ts = _ts_local()
        if sender is Sender.USER:
            # The typed line is still on screen after input(); stamp it in place.
            _rewrite_prev_line(f"[{ts}] >>> You: {text}")
            return

        first, *rest = text.split("\n")
        print(f"[{ts}] <<< {self.app_name}: {first}")
        for line in rest:
            print(f"    {line}")
        print(flush=True)


def handle_user_input(state: AppState, renderer: Renderer, line: str) -> bool:
    """
    Single funnel for one submitted line, whatever UI trigger produced it.

    Returns True while the assistant still accepts input.
    """
    renderer.render(line, Sender.USER)

    try:
        reply = state.assistant.get_response(line)
    except Exception:
        logger.exception("Command handler crashed.")
        reply = replies.INTERNAL_ERROR

    renderer.render(reply, Sender.ASSISTANT)
    return not state.assistant.is_terminated


def run_console_loop(state: AppState, renderer: Renderer | None = None) -> None:
    if renderer is None:
        renderer = ConsoleRenderer(str(getattr(state.settings, "app_name", "Duke")))

    logger.info("Console connector started.")

    while True:
        try:
            user_input = input(">>> You: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if not handle_user_input(state, renderer, user_input):
            break

    logger.info("Console connector finished.")
