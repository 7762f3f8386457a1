# src/twolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the configured storage backend into a TodoStore,
- loads the persisted snapshot before the presenter starts.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..storage import get_storage
from ..todos.todo_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, storage=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and storage) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if storage is None:
        storage = get_storage(settings)

    store = TodoStore(
        storage,
        todos_key=getattr(settings, "todos_key", "@toDos"),
        working_key=getattr(settings, "working_key", "@working"),
        strict=bool(getattr(settings, "strict_persistence", False)),
    )
    logger.info(
        "Wired TodoStore backend=%s", getattr(settings, "storage_backend", type(storage).__name__)
    )
    return AppState(
        settings=settings,
        store=store,
        confirm_delete=bool(getattr(settings, "confirm_delete", True)),
    )


async def load_state(state: AppState) -> AppState:
    """Populate the store from storage; never raises on missing/bad data."""
    await state.store.load()
    return state
