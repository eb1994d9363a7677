"""Webhook configuration persistence.

Owns the read/write path of the single webhook record. The record is always
written whole, in one ``set`` call, so readers never observe a half-updated
config.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from intention_webhook.config import DEFAULT_STORAGE_KEY
from intention_webhook.exceptions import StoreUnavailable
from intention_webhook.models import WebhookConfig

if TYPE_CHECKING:
    from .base import KeyValueStore

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes the webhook record through a KeyValueStore.

    No URL validation happens here; callers validate before saving.

    Example:
        ```python
        config_store = ConfigStore(InMemoryStore())
        await config_store.save(True, "https://hooks.example.com/in")
        config = await config_store.get()
        ```
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        """Initialize the config store.

        Args:
            store: Key-value capability holding the record.
            key: Key the record is stored under.
        """
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    async def get(self) -> WebhookConfig:
        """Read the persisted config.

        Returns the default (disabled, no URL) when nothing is stored. The
        default is not written back.

        Raises:
            StoreUnavailable: If the store fails or holds an unreadable record.
        """
        try:
            raw = await self._store.get(self._key)
        except Exception as e:
            logger.error("Failed to read webhook config: %s", e)
            raise StoreUnavailable(f"Could not read webhook config: {e}") from e

        if raw is None:
            return WebhookConfig()

        try:
            return WebhookConfig.model_validate(raw)
        except PydanticValidationError as e:
            logger.error("Stored webhook config is malformed: %s", e)
            raise StoreUnavailable("Stored webhook config is malformed") from e

    async def save(self, enabled: bool, url: str) -> WebhookConfig:
        """Overwrite the persisted config.

        Args:
            enabled: Whether delivery is enabled.
            url: Destination URL, stored as given.

        Returns:
            The config that was written.

        Raises:
            StoreUnavailable: If the write fails.
        """
        config = WebhookConfig(enabled=enabled, url=url)
        try:
            await self._store.set(self._key, config.model_dump(mode="json"))
        except Exception as e:
            logger.error("Failed to save webhook config: %s", e)
            raise StoreUnavailable(f"Could not save webhook config: {e}") from e

        logger.info("Saved webhook config (enabled=%s)", enabled)
        return config
