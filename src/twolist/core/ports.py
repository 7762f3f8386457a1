# src/twolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on a key-value Protocol instead of a concrete backend,
so storage stays swappable and tests can inject fakes.
"""

from typing import Protocol

from ..todos.todo_models import Category, EditSession, PersistResult, TodoItem


class KeyValueStorage(Protocol):
    """
    Device-local string storage (AsyncStorage-like).

    Both calls may raise on I/O failure; deciding what to do with that is
    the caller's policy, not the adapter's.
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class TodoRepo(Protocol):
    # Read side used by presenters
    @property
    def category(self) -> Category: ...
    @property
    def draft(self) -> str: ...
    @property
    def edit_session(self) -> EditSession | None: ...
    def visible(self) -> list[tuple[str, TodoItem]]: ...
    def get(self, todo_id: str) -> TodoItem | None: ...
    def counts(self) -> dict[Category, tuple[int, int]]: ...

    # Mutations
    async def load(self) -> None: ...
    async def set_category(self, category: Category) -> PersistResult: ...
    def set_draft(self, text: str) -> None: ...
    async def create(self, text: str | None = None) -> PersistResult | None: ...
    async def delete(self, todo_id: str) -> PersistResult | None: ...
    def begin_edit(self, todo_id: str) -> bool: ...
    def set_edit_text(self, text: str) -> None: ...
    async def commit_edit(self, text: str | None = None) -> PersistResult | None: ...
    def cancel_edit(self) -> bool: ...
    async def toggle_complete(self, todo_id: str) -> PersistResult | None: ...
