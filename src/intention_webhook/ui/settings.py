"""Settings page controller.

Validates and persists the webhook destination and reports what the page
should display. Messages here stay on screen until the next action unless a
duration is given.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from intention_webhook.exceptions import StoreUnavailable, ValidationError
from intention_webhook.models import StatusFeedback, WebhookConfig
from intention_webhook.webhooks import validate_webhook_url

if TYPE_CHECKING:
    from intention_webhook.service import WebhookService

logger = logging.getLogger(__name__)

TEST_INTENTION = "Webhook test from settings"

MISSING_URL = "Please enter a webhook URL."
INVALID_URL = "Please enter a valid URL (https://...)."
SAVED = "Webhook settings saved successfully!"
SAVE_FAILED = "Error saving webhook settings."
DISABLED = "Webhook disabled."
DISABLE_FAILED = "Error saving settings."

SAVED_DURATION_SECONDS = 3.0
DISABLED_DURATION_SECONDS = 2.0


class SettingsController:
    """Backs the webhook section of the settings page."""

    def __init__(self, service: WebhookService) -> None:
        self._service = service

    async def load(self) -> WebhookConfig:
        """Return the stored config to populate the form.

        Raises:
            StoreUnavailable: If the store cannot be read.
        """
        return await self._service.config_store.get()

    async def save(self, enabled: bool, url: str) -> StatusFeedback:
        """Validate and persist the form.

        Nothing is written when the URL is missing or invalid.
        """
        try:
            url = validate_webhook_url(url)
        except ValidationError as e:
            logger.info("Rejected webhook URL: %s", e.message)
            text = MISSING_URL if not url.strip() else INVALID_URL
            return StatusFeedback(level="error", text=text)

        try:
            await self._service.config_store.save(enabled, url)
        except StoreUnavailable:
            return StatusFeedback(level="error", text=SAVE_FAILED)

        return StatusFeedback(
            level="success", text=SAVED, duration_seconds=SAVED_DURATION_SECONDS
        )

    async def disable(self, url: str = "") -> StatusFeedback:
        """Persist the disabled flag, keeping whatever URL is in the form.

        Reports success only once the write has been confirmed.
        """
        try:
            await self._service.config_store.save(False, url.strip())
        except StoreUnavailable:
            return StatusFeedback(level="error", text=DISABLE_FAILED)

        return StatusFeedback(
            level="info", text=DISABLED, duration_seconds=DISABLED_DURATION_SECONDS
        )

    async def send_test(self, page_url: str = "") -> StatusFeedback:
        """Send a test intention through the shared delivery path."""
        result = await self._service.send(TEST_INTENTION, page_url)
        level = "success" if result.success else "error"
        return StatusFeedback(level=level, text=result.message)
