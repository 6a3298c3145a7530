# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "GLASSTODO_APP_NAME": "App display name (default: glass-todo).",
    "GLASSTODO_LOG_LEVEL": "Logging level for the log file (default: INFO).",
    # Storage (gitignored)
    "GLASSTODO_DATA_DIR": "Local data directory (default: .local/glass_todo).",
    "GLASSTODO_STORAGE_PATH": "Key/value JSON file (default: <data_dir>/storage.json).",
    "GLASSTODO_STORAGE_KEY": "Key the task list is stored under (default: todos).",
    "GLASSTODO_PERSIST": "Save tasks to disk (true/false, default: true).",
    # Celebration
    "GLASSTODO_CELEBRATE": "Show confetti when every task is done (true/false, default: true).",
    "GLASSTODO_CONFETTI_COUNT": "Confetti glyphs per burst (default: 150).",
}
