"""WebhookService: the single entry point for sending intentions.

Both callers (the settings page and the intention widget) go through
``WebhookService.send`` so they share one config read path and one retry
policy.

Example:
    ```python
    from intention_webhook.service import WebhookService

    service = WebhookService.create()
    result = await service.send("write tests", "https://news.example.com/a")
    print(result.success, result.message)
    ```
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from intention_webhook.config import Settings
from intention_webhook.exceptions import ConfigurationError, StoreUnavailable
from intention_webhook.models import DeliveryResult
from intention_webhook.storage import ConfigStore, InMemoryStore, JsonFileStore
from intention_webhook.webhooks import RetryingDeliverer, build_payload

if TYPE_CHECKING:
    from intention_webhook.storage import KeyValueStore

logger = logging.getLogger(__name__)

NOT_ENABLED_MESSAGE = "Webhook not enabled"


class WebhookService:
    """Composes config lookup, payload building and delivery.

    Holds no per-send state, so concurrent sends from different callers
    do not interfere.

    Attributes:
        config_store: Read/write path of the webhook record.
        deliverer: Network attempt loop.
    """

    def __init__(self, config_store: ConfigStore, deliverer: RetryingDeliverer) -> None:
        self.config_store = config_store
        self.deliverer = deliverer

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        store: KeyValueStore | None = None,
    ) -> WebhookService:
        """Create a WebhookService with default dependencies.

        Args:
            settings: Optional settings. Uses environment defaults if None.
            store: Optional key-value store. When None, a JsonFileStore is
                used if ``settings.store_path`` is set, else an InMemoryStore.

        Returns:
            Configured WebhookService instance.

        Raises:
            ConfigurationError: If ``settings.store_path`` names a directory.
        """
        settings = settings or Settings()

        if store is None:
            if settings.store_path:
                if Path(settings.store_path).is_dir():
                    raise ConfigurationError(
                        f"store_path must be a file, not a directory: {settings.store_path}"
                    )
                store = JsonFileStore(settings.store_path)
            else:
                store = InMemoryStore()

        deliverer = RetryingDeliverer(
            timeout_seconds=settings.request_timeout_seconds,
            retry_delay_seconds=settings.retry_delay_seconds,
            max_attempts=settings.max_attempts,
        )
        return cls(ConfigStore(store, key=settings.storage_key), deliverer)

    async def send(self, intention: str, page_url: str) -> DeliveryResult:
        """Send an intention to the configured webhook.

        Returns success without any network call when the webhook is
        disabled or has no URL. A failing store is reported as a failed
        result and is not retried.

        Args:
            intention: Text the user typed.
            page_url: Page the user was on.

        Returns:
            DeliveryResult; this method does not raise.
        """
        try:
            config = await self.config_store.get()
        except StoreUnavailable as e:
            return DeliveryResult.failed(e.message)

        if not config.is_active:
            logger.debug("Webhook not enabled, skipping send")
            return DeliveryResult.ok(NOT_ENABLED_MESSAGE)

        payload = build_payload(intention, page_url)
        logger.info("Sending intention to %s", config.url)
        return await self.deliverer.deliver(config.url, payload)
