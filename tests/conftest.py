# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from twolist.core.state import AppState
from twolist.todos.todo_store import TodoStore

from .fakes import FrozenClock, RecordingStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the storage factory.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="twolist-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        storage_backend="memory",
        json_path=tmp_path / "data" / "storage.json",
        sqlite_path=tmp_path / "data" / "storage.sqlite3",
        todos_key="@toDos",
        working_key="@working",
        strict_persistence=False,
        confirm_delete=True,
    )


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture()
def store(storage: RecordingStorage, clock: FrozenClock) -> TodoStore:
    return TodoStore(storage, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TodoStore) -> AppState:
    return AppState(settings=settings, store=store, confirm_delete=settings.confirm_delete)
