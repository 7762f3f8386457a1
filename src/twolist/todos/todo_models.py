# src/twolist/todos/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Category(StrEnum):
    """
    Which of the two lists a todo belongs to.

    On disk the category is the boolean "working" flag (true == WORK),
    both for the stored filter and for every record.
    """

    WORK = "work"
    TRAVEL = "travel"

    @classmethod
    def from_working(cls, working: bool) -> Category:
        return cls.WORK if working else cls.TRAVEL

    @property
    def working(self) -> bool:
        return self is Category.WORK


class MalformedRecord(ValueError):
    """A stored record does not have the {text, working, completed?} shape."""


@dataclass(slots=True)
class TodoItem:
    text: str
    category: Category
    # None == "completed" key absent (only produced by an edit commit).
    completed: bool | None = False

    @property
    def is_done(self) -> bool:
        return bool(self.completed)

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"text": self.text, "working": self.category.working}
        if self.completed is not None:
            out["completed"] = self.completed
        return out

    @classmethod
    def from_json(cls, raw: Any) -> TodoItem:
        if not isinstance(raw, dict):
            raise MalformedRecord(f"record is not an object: {raw!r}")
        text = raw.get("text")
        working = raw.get("working")
        completed = raw.get("completed")
        if not isinstance(text, str) or text == "":
            raise MalformedRecord("record text must be a non-empty string")
        if not isinstance(working, bool):
            raise MalformedRecord("record working flag must be a boolean")
        if completed is not None and not isinstance(completed, bool):
            raise MalformedRecord("record completed flag must be a boolean")
        return cls(text=text, category=Category.from_working(working), completed=completed)


@dataclass(slots=True)
class EditSession:
    todo_id: str
    text: str


@dataclass(slots=True, frozen=True)
class PersistResult:
    """Outcome of one full-snapshot write."""

    key: str
    ok: bool
    error: BaseException | None = None
