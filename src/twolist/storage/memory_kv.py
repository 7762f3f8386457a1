# src/twolist/storage/memory_kv.py

from __future__ import annotations


class InMemoryKeyValueStorage:
    """Process-local key-value storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value
