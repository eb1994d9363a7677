"""Intention widget controller.

Submitting never waits on the network: delivery runs as a background task
and its outcome is turned into a short-lived status indicator.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from intention_webhook.models import DeliveryResult, StatusFeedback
from intention_webhook.service import NOT_ENABLED_MESSAGE

if TYPE_CHECKING:
    from intention_webhook.service import WebhookService

logger = logging.getLogger(__name__)

SUCCESS_INDICATOR_SECONDS = 2.5
ERROR_INDICATOR_SECONDS = 3.0

StatusCallback = Callable[[StatusFeedback], None]


class IntentionWidget:
    """Submits intentions typed into the in-page widget.

    Attributes:
        last_status: Indicator from the most recent completed delivery, or
            None if nothing has been shown yet.
    """

    def __init__(
        self,
        service: WebhookService,
        on_status: StatusCallback | None = None,
    ) -> None:
        self._service = service
        self._on_status = on_status
        self._pending: set[asyncio.Task[DeliveryResult]] = set()
        self.last_status: StatusFeedback | None = None

    @property
    def pending(self) -> int:
        return len(self._pending)

    def submit(self, intention: str, page_url: str) -> asyncio.Task[DeliveryResult] | None:
        """Start delivering an intention in the background.

        Must be called from a running event loop.

        Returns:
            The delivery task, or None when the intention is blank.
        """
        if not intention.strip():
            return None

        task = asyncio.create_task(self._deliver(intention, page_url))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def wait_pending(self) -> None:
        """Wait for every in-flight delivery to finish."""
        if self._pending:
            await asyncio.gather(*self._pending)

    async def _deliver(self, intention: str, page_url: str) -> DeliveryResult:
        result = await self._service.send(intention, page_url)

        # The disabled short-circuit shows nothing.
        if result.success and result.message == NOT_ENABLED_MESSAGE:
            return result

        self._show(result)
        return result

    def _show(self, result: DeliveryResult) -> None:
        if result.success:
            status = StatusFeedback(
                level="success",
                text=result.message,
                duration_seconds=SUCCESS_INDICATOR_SECONDS,
            )
        else:
            logger.warning("Intention delivery failed: %s", result.message)
            status = StatusFeedback(
                level="error",
                text=result.message,
                duration_seconds=ERROR_INDICATOR_SECONDS,
            )

        self.last_status = status
        if self._on_status is not None:
            self._on_status(status)
