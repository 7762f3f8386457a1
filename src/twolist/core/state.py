# src/twolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..todos.todo_store import TodoStore


@dataclass
class AppState:
    """
    Everything a presenter needs, owned explicitly (no module globals).

    settings is typed as Any so tests can pass a SimpleNamespace.
    """

    settings: Any
    store: TodoStore
    confirm_delete: bool = True
