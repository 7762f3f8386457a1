# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TWOLIST_APP_NAME": "App display name (default: twolist).",
    "TWOLIST_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Storage
    "TWOLIST_DATA_DIR": "Local data directory (default: .local/twolist).",
    "TWOLIST_STORAGE_BACKEND": "json | sqlite | memory (default: json).",
    "TWOLIST_JSON_PATH": "JSON storage file (default: <data_dir>/storage.json).",
    "TWOLIST_SQLITE_PATH": "SQLite storage file (default: <data_dir>/storage.sqlite3).",
    "TWOLIST_TODOS_KEY": "Storage key for the to-do collection (default: @toDos).",
    "TWOLIST_WORKING_KEY": "Storage key for the active list flag (default: @working).",
    "TWOLIST_STRICT_PERSISTENCE": "Raise on storage write failures instead of logging (default: false).",
    # Console
    "TWOLIST_CONFIRM_DELETE": "Ask 'Are you sure?' before /rm (default: true).",
}
