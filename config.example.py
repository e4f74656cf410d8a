# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name used in the greeting (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "TASKPAD_LOG_TO_FILE": "Write <data_dir>/taskpad.log (true/false, default: true).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory (default: .local/taskpad).",
    "TASKPAD_STORE_PATH": "Task store file (default: <data_dir>/tasks.txt).",
    # Store policy
    "TASKPAD_WRITE_THROUGH": "Save after every change (true) or only on exit (false). Default: true.",
    "TASKPAD_START_EMPTY_IF_MISSING": (
        "Start with an empty list when the store file does not exist (default: true). "
        "false => refuse to start."
    ),
}
