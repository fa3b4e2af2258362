"""Duke: a conversational task-tracking assistant."""

__version__ = "0.1.0"
