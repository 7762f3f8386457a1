# src/twolist/todos/todo_store.py

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from ..core.ports import KeyValueStorage
from ..errors import PersistenceError
from .todo_models import Category, EditSession, MalformedRecord, PersistResult, TodoItem

logger = logging.getLogger(__name__)

DEFAULT_TODOS_KEY = "@toDos"
DEFAULT_WORKING_KEY = "@working"


class TodoStore:
    """
    In-memory to-do collection mirrored to a key-value storage.

    Write policy:
    - every mutation rewrites the whole collection (or the filter) under one key
    - memory is updated first, then the snapshot is written
    - write failures are logged and reported as a failed PersistResult;
      with strict=True they are raised as PersistenceError instead

    Only one caller (the presenter) mutates a store; there is no locking.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        todos_key: str = DEFAULT_TODOS_KEY,
        working_key: str = DEFAULT_WORKING_KEY,
        clock: Callable[[], float] = time.time,
        strict: bool = False,
    ) -> None:
        self._storage = storage
        self._todos_key = todos_key
        self._working_key = working_key
        self._clock = clock
        self._strict = strict

        self._todos: dict[str, TodoItem] = {}
        self._category = Category.WORK
        self._draft = ""
        self._edit: EditSession | None = None
        self._last_id = 0

    # ---- read side ----

    @property
    def category(self) -> Category:
        return self._category

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def edit_session(self) -> EditSession | None:
        return self._edit

    def __len__(self) -> int:
        return len(self._todos)

    def __contains__(self, todo_id: object) -> bool:
        return todo_id in self._todos

    def get(self, todo_id: str) -> TodoItem | None:
        return self._todos.get(todo_id)

    def items(self) -> dict[str, TodoItem]:
        return dict(self._todos)

    def visible(self) -> list[tuple[str, TodoItem]]:
        """Records of the active category, in insertion order."""
        return [(k, v) for k, v in self._todos.items() if v.category == self._category]

    def counts(self) -> dict[Category, tuple[int, int]]:
        """Per category: (open, done)."""
        out = {c: [0, 0] for c in Category}
        for item in self._todos.values():
            out[item.category][1 if item.is_done else 0] += 1
        return {c: (n[0], n[1]) for c, n in out.items()}

    def snapshot(self) -> dict[str, dict[str, Any]]:
        return {k: v.to_json() for k, v in self._todos.items()}

    # ---- persistence ----

    async def load(self) -> None:
        """
        Read the stored filter and collection.

        Missing or malformed data leaves the current value in place.
        The two keys are independent: one being bad never blocks the other.
        """
        category = await self._load_category()
        if category is not None:
            self._category = category

        todos = await self._load_todos()
        if todos is not None:
            self._todos = todos
            self._edit = None
            self._reseed_ids()

        logger.info(
            "TodoStore loaded category=%s total=%d", self._category.value, len(self._todos)
        )

    async def _read(self, key: str) -> str | None:
        try:
            return await self._storage.get(key)
        except Exception:
            logger.exception("Failed to read key=%s; treating as missing.", key)
            return None

    async def _load_category(self) -> Category | None:
        raw = await self._read(self._working_key)
        if raw is None:
            return None
        try:
            working = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable category snapshot key=%s", self._working_key)
            return None
        if not isinstance(working, bool):
            logger.warning("Ignoring non-boolean category snapshot key=%s", self._working_key)
            return None
        return Category.from_working(working)

    async def _load_todos(self) -> dict[str, TodoItem] | None:
        raw = await self._read(self._todos_key)
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable todos snapshot key=%s", self._todos_key)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring todos snapshot that is not an object key=%s", self._todos_key)
            return None
        try:
            return {str(k): TodoItem.from_json(v) for k, v in data.items()}
        except MalformedRecord as e:
            logger.warning("Ignoring malformed todos snapshot key=%s: %s", self._todos_key, e)
            return None

    async def _write(self, key: str, value: str) -> PersistResult:
        try:
            await self._storage.set(key, value)
        except Exception as e:
            logger.exception("Failed to persist key=%s", key)
            if self._strict:
                raise PersistenceError(key, e) from e
            return PersistResult(key=key, ok=False, error=e)
        logger.debug("Persisted key=%s bytes=%d", key, len(value))
        return PersistResult(key=key, ok=True)

    async def persist(self) -> PersistResult:
        """Write the full collection snapshot."""
        return await self._write(self._todos_key, json.dumps(self.snapshot(), ensure_ascii=False))

    async def persist_category(self) -> PersistResult:
        return await self._write(self._working_key, json.dumps(self._category.working))

    # ---- ids ----

    def _reseed_ids(self) -> None:
        known = [int(k) for k in self._todos if k.isascii() and k.isdigit()]
        if known:
            self._last_id = max(self._last_id, max(known))

    def _next_id(self) -> str:
        now_ms = int(self._clock() * 1000)
        self._last_id = max(now_ms, self._last_id + 1)
        return str(self._last_id)

    # ---- mutations ----

    async def set_category(self, category: Category) -> PersistResult:
        self._category = Category(category)
        return await self.persist_category()

    def set_draft(self, text: str) -> None:
        self._draft = text

    async def create(self, text: str | None = None) -> PersistResult | None:
        """
        Add a todo to the active category.

        Uses the draft when text is None. Only the exact empty string is
        rejected; whitespace-only text is accepted.
        """
        if text is None:
            text = self._draft
        if text == "":
            return None

        todo_id = self._next_id()
        self._todos[todo_id] = TodoItem(text=text, category=self._category, completed=False)
        self._draft = ""
        logger.debug("Created todo id=%s category=%s", todo_id, self._category.value)
        return await self.persist()

    async def delete(self, todo_id: str) -> PersistResult | None:
        """Remove a todo. The caller is responsible for confirming with the user."""
        if todo_id not in self._todos:
            return None
        del self._todos[todo_id]
        if self._edit is not None and self._edit.todo_id == todo_id:
            self._edit = None
        logger.debug("Deleted todo id=%s", todo_id)
        return await self.persist()

    def begin_edit(self, todo_id: str) -> bool:
        """Open (or switch) the edit session; unsaved scratch text is dropped."""
        item = self._todos.get(todo_id)
        if item is None:
            return False
        self._edit = EditSession(todo_id=todo_id, text=item.text)
        return True

    def set_edit_text(self, text: str) -> None:
        if self._edit is not None:
            self._edit.text = text

    async def commit_edit(self, text: str | None = None) -> PersistResult | None:
        """
        Save the edit session.

        The record is rebuilt from text + category only, so "completed" is
        reset to absent (the stored record has no "completed" key).
        """
        session = self._edit
        if session is None:
            return None
        if text is None:
            text = session.text
        if text == "":
            return None

        item = self._todos.get(session.todo_id)
        if item is None:
            self._edit = None
            return None

        self._todos[session.todo_id] = TodoItem(text=text, category=item.category, completed=None)
        self._edit = None
        logger.debug("Edited todo id=%s", session.todo_id)
        return await self.persist()

    def cancel_edit(self) -> bool:
        if self._edit is None:
            return False
        self._edit = None
        return True

    async def toggle_complete(self, todo_id: str) -> PersistResult | None:
        item = self._todos.get(todo_id)
        if item is None:
            return None
        self._todos[todo_id] = replace(item, completed=not item.is_done)
        return await self.persist()
