# tests/test_storage.py

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from twolist.storage import (
    InMemoryKeyValueStorage,
    JSONFileKeyValueStorage,
    SQLiteKeyValueStorage,
    get_storage,
)
from twolist.todos.todo_models import Category
from twolist.todos.todo_store import TodoStore


@pytest.fixture(params=["memory", "json", "sqlite"])
def kv(request, tmp_path: Path):
    """Every backend must pass the same get/set contract."""
    if request.param == "json":
        return JSONFileKeyValueStorage(tmp_path / "nested" / "storage.json")
    if request.param == "sqlite":
        return SQLiteKeyValueStorage(tmp_path / "nested" / "storage.sqlite3")
    return InMemoryKeyValueStorage()


@pytest.mark.asyncio
async def test_get_missing_key_returns_none(kv) -> None:
    assert await kv.get("@toDos") is None


@pytest.mark.asyncio
async def test_set_then_get_and_overwrite(kv) -> None:
    await kv.set("@working", "true")
    await kv.set("@toDos", '{"1": {"text": "a"}}')
    await kv.set("@working", "false")

    assert await kv.get("@working") == "false"
    assert await kv.get("@toDos") == '{"1": {"text": "a"}}'


@pytest.mark.asyncio
async def test_unicode_values_survive(kv) -> None:
    await kv.set("@toDos", "여행 🚀")
    assert await kv.get("@toDos") == "여행 🚀"


@pytest.mark.asyncio
async def test_store_round_trip_through_backend(kv) -> None:
    store = TodoStore(kv)
    await store.create("Buy milk")
    await store.set_category(Category.TRAVEL)
    await store.create("Visit Paris")

    fresh = TodoStore(kv)
    await fresh.load()

    assert fresh.items() == store.items()
    assert fresh.category is Category.TRAVEL


@pytest.mark.asyncio
async def test_json_file_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    await JSONFileKeyValueStorage(path).set("k", "v")

    assert await JSONFileKeyValueStorage(path).get("k") == "v"
    assert json.loads(path.read_text("utf-8")) == {"k": "v"}
    assert list(tmp_path.glob("*.tmp")) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
async def test_json_file_unreadable_reads_as_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "storage.json"
    path.write_text(content, encoding="utf-8")
    kv = JSONFileKeyValueStorage(path)

    assert await kv.get("k") is None
    await kv.set("k", "v")
    assert json.loads(path.read_text("utf-8")) == {"k": "v"}


@pytest.mark.asyncio
async def test_sqlite_persists_across_instances(tmp_path: Path) -> None:
    db = tmp_path / "storage.sqlite3"
    await SQLiteKeyValueStorage(db).set("k", "v1")
    await SQLiteKeyValueStorage(db).set("k", "v2")
    assert await SQLiteKeyValueStorage(db).get("k") == "v2"


@pytest.mark.parametrize(
    ("backend", "cls"),
    [
        ("json", JSONFileKeyValueStorage),
        ("JSON ", JSONFileKeyValueStorage),
        ("sqlite", SQLiteKeyValueStorage),
        ("memory", InMemoryKeyValueStorage),
    ],
)
def test_get_storage_picks_backend(settings: SimpleNamespace, backend: str, cls: type) -> None:
    settings.storage_backend = backend
    assert isinstance(get_storage(settings), cls)


def test_get_storage_rejects_unknown_backend(settings: SimpleNamespace) -> None:
    settings.storage_backend = "redis"
    with pytest.raises(ValueError, match="Unknown storage backend"):
        get_storage(settings)
