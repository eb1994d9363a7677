"""JSON file key-value store.

Persists every key in a single JSON object on disk. Writes go to a sibling
temporary file that is then renamed over the original, so a crash mid-write
leaves the previous contents intact.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonFileStore:
    """KeyValueStore backed by a JSON file.

    File IO runs in a worker thread so the event loop is never blocked.
    Concurrent writers in the same process are serialized; across processes
    the last rename wins.

    Example:
        ```python
        store = JsonFileStore("~/.config/intention-webhook/storage.json")
        await store.set("webhook", {"enabled": True, "url": "https://hooks.example.com/in"})
        ```
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path).expanduser()
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def get(self, key: str) -> Any | None:
        data = await asyncio.to_thread(self._read)
        return data.get(key)

    async def set(self, key: str, value: Any) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read)
            data[key] = value
            await asyncio.to_thread(self._write, data)
        logger.debug("Wrote key %s to %s", key, self._path)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        with self._path.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self._path} does not contain a JSON object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
