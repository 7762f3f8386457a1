# src/twolist/todos/todo_api.py

from __future__ import annotations

from ..core.ports import TodoRepo
from .todo_models import Category, TodoItem

PLACEHOLDERS = {
    Category.WORK: "Add a To Do",
    Category.TRAVEL: "Where do you want to go?",
}


def placeholder_for(category: Category) -> str:
    return PLACEHOLDERS[category]


def todo_id_at(store: TodoRepo, position: int | str) -> str | None:
    """
    Map a 1-based position in the visible list to a todo id.

    Presenters number only what they show, so positions are relative to
    the active category. Returns None for anything out of range.
    """
    try:
        n = int(position)
    except (TypeError, ValueError):
        return None
    rows = store.visible()
    if n < 1 or n > len(rows):
        return None
    return rows[n - 1][0]


def format_item(position: int, item: TodoItem, *, editing: str | None = None) -> str:
    mark = "[x]" if item.is_done else "[ ]"
    if editing is not None:
        return f"{position:>3}. {mark} {item.text}  -> editing: {editing}"
    return f"{position:>3}. {mark} {item.text}"


def render_header(category: Category) -> str:
    work = "*Work*" if category is Category.WORK else " Work "
    travel = "*Travel*" if category is Category.TRAVEL else " Travel "
    return f"{work} | {travel}"


def render_list(store: TodoRepo) -> str:
    """Header plus the numbered filtered view."""
    session = store.edit_session
    lines = [render_header(store.category)]
    rows = store.visible()
    if not rows:
        lines.append("  (empty)")
    for i, (todo_id, item) in enumerate(rows, start=1):
        editing = session.text if session is not None and session.todo_id == todo_id else None
        lines.append(format_item(i, item, editing=editing))
    return "\n".join(lines)
