# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "DUKE_APP_NAME": "Name shown in the chat transcript (default: Duke).",
    "DUKE_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "DUKE_DATA_DIR": "Local data directory (default: .local/duke).",
    "DUKE_TASKS_PATH": "Task file, one record per line (default: <data_dir>/tasks.txt).",
    "DUKE_LOG_DIR": "Directory for duke.log (default: <data_dir>).",
}
