# src/duke_assistant/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .dispatcher import Assistant


@dataclass
class AppState:
    # Settings are kept on the state so connectors can read app_name, paths, etc.
    settings: Any
    assistant: Assistant

    # Startup messages for the transcript (file created / imported / unreadable).
    notices: list[str] = field(default_factory=list)
