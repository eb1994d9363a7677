"""In-memory key-value store."""

from __future__ import annotations

import asyncio
import copy
from typing import Any


class InMemoryStore:
    """Process-local KeyValueStore.

    Values are deep-copied on the way in and out so callers cannot mutate
    stored records through a reference they kept.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any | None:
        value = self._data.get(key)
        return copy.deepcopy(value)

    async def set(self, key: str, value: Any) -> None:
        async with self._lock:
            self._data[key] = copy.deepcopy(value)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
