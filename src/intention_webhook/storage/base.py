"""Key-value capability used for persistence.

The webhook record lives behind a minimal async key-value interface so the
persistence engine can be swapped (browser storage bridge, JSON file, memory)
without touching delivery code.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for key-value persistence backends.

    Implementations report failures by raising; ConfigStore converts any
    such failure into StoreUnavailable.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the value stored under key, or None when absent."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value.

        Returns only once the write is durable for this backend.
        """
        ...
