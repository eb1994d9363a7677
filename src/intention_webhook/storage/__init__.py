"""Persistence for intention-webhook.

Example:
    ```python
    from intention_webhook.storage import ConfigStore, JsonFileStore

    config_store = ConfigStore(JsonFileStore("storage.json"))
    config = await config_store.get()
    ```
"""

from .base import KeyValueStore
from .config_store import ConfigStore
from .json_file import JsonFileStore
from .memory import InMemoryStore

__all__ = [
    "ConfigStore",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
]
