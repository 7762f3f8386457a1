# src/twolist/errors.py

from __future__ import annotations


class TwolistError(Exception):
    """Base class for errors raised by twolist."""


class PersistenceError(TwolistError):
    """A storage write failed and the store was asked not to swallow it."""

    def __init__(self, key: str, cause: BaseException) -> None:
        super().__init__(f"failed to persist {key!r}: {cause}")
        self.key = key
        self.cause = cause
