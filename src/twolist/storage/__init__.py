# src/twolist/storage/__init__.py

"""
Key-value storage backends and the factory that picks one from settings.

Backends:
    - "json" (default): one JSON file holding every key
    - "sqlite": a kv table in a SQLite database
    - "memory": nothing is written to disk
"""

from __future__ import annotations

from pathlib import Path

from ..core.ports import KeyValueStorage
from .json_kv import JSONFileKeyValueStorage
from .memory_kv import InMemoryKeyValueStorage
from .sqlite_kv import SQLiteKeyValueStorage

__all__ = [
    "InMemoryKeyValueStorage",
    "JSONFileKeyValueStorage",
    "KeyValueStorage",
    "SQLiteKeyValueStorage",
    "get_storage",
]


def get_storage(settings) -> KeyValueStorage:
    """
    Build the configured backend.

    Raises:
        ValueError: unknown settings.storage_backend.
    """
    backend = str(getattr(settings, "storage_backend", "json") or "json").strip().lower()

    if backend == "json":
        return JSONFileKeyValueStorage(Path(settings.json_path))
    if backend == "sqlite":
        return SQLiteKeyValueStorage(Path(settings.sqlite_path))
    if backend == "memory":
        return InMemoryKeyValueStorage()
    raise ValueError(
        f"Unknown storage backend: {backend!r}. Expected 'json', 'sqlite' or 'memory'."
    )
