# src/duke_assistant/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, greets the user and runs the console REPL
in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleRenderer, run_console_loop
from ..core import replies
from ..core.ports import Sender
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = getattr(settings, "log_dir", ".local/duke")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "Duke"))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    renderer = ConsoleRenderer(settings.app_name)
    renderer.render(replies.GREETING, Sender.ASSISTANT)
    for notice in state.notices:
        renderer.render(notice, Sender.ASSISTANT)

    try:
        run_console_loop(state, renderer)
    finally:
        logger.info("Bye. %d task(s) in the list.", state.assistant.tasks.size())


if __name__ == "__main__":
    main()
