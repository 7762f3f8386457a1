# src/twolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything has a default; the app runs with no configuration at all.
- Consumers accept injected settings, get_settings() is only the fallback.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TWOLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    json_path: Path
    sqlite_path: Path
    todos_key: str
    working_key: str
    strict_persistence: bool

    # ---- Console ----
    confirm_delete: bool

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "twolist") or "twolist"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/twolist"))
        storage_backend = _env(_k("STORAGE_BACKEND"), "json").strip().lower() or "json"
        json_path = _env_path(_k("JSON_PATH"), data_dir / "storage.json")
        sqlite_path = _env_path(_k("SQLITE_PATH"), data_dir / "storage.sqlite3")

        # AsyncStorage key names; keep them so existing snapshots stay readable.
        todos_key = _env(_k("TODOS_KEY"), "@toDos") or "@toDos"
        working_key = _env(_k("WORKING_KEY"), "@working") or "@working"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            json_path=json_path,
            sqlite_path=sqlite_path,
            todos_key=todos_key,
            working_key=working_key,
            strict_persistence=_env_bool(_k("STRICT_PERSISTENCE"), False),
            confirm_delete=_env_bool(_k("CONFIRM_DELETE"), True),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
