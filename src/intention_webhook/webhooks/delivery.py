"""Webhook delivery with a deadline per attempt and a single fixed-delay retry.

Every outcome, including unexpected errors, is returned as a DeliveryResult;
nothing raised inside the attempt loop escapes ``deliver``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from intention_webhook.config import (
    MAX_ATTEMPTS,
    REQUEST_TIMEOUT_SECONDS,
    RETRY_DELAY_SECONDS,
)
from intention_webhook.exceptions import (
    DeliveryError,
    DeliveryTimeout,
    HTTPError,
    TransportError,
)
from intention_webhook.models import DeliveryAttempt, DeliveryPayload, DeliveryResult

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]

JSON_HEADERS = {"Content-Type": "application/json"}


def _log_retry(retry_state: RetryCallState) -> None:
    """Log the pause before the next attempt."""
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.info(
        "Retrying webhook in %.1fs (attempt %d failed)",
        delay,
        retry_state.attempt_number,
    )


class RetryingDeliverer:
    """Posts a payload to a destination with bounded retries.

    Up to ``max_attempts`` POSTs are made. Each is cancelled once
    ``timeout_seconds`` elapse. Between attempts the deliverer waits a fixed
    ``retry_delay_seconds``. Any non-2xx status, transport failure, or timeout
    counts as a failed attempt; 4xx responses are retried like the rest.

    Example:
        ```python
        deliverer = RetryingDeliverer()
        result = await deliverer.deliver("https://hooks.example.com/in", payload)
        if not result.success:
            print(result.message)
        ```
    """

    def __init__(
        self,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        retry_delay_seconds: float = RETRY_DELAY_SECONDS,
        max_attempts: int = MAX_ATTEMPTS,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        """Initialize the deliverer.

        Args:
            timeout_seconds: Deadline for each attempt.
            retry_delay_seconds: Fixed delay before a retry.
            max_attempts: Total attempts, including the first.
            transport: Optional httpx transport (tests pass a MockTransport).
            sleep: Coroutine used for the retry delay.
        """
        self._timeout = timeout_seconds
        self._retry_delay = retry_delay_seconds
        self._max_attempts = max_attempts
        self._transport = transport
        self._sleep = sleep

    async def deliver(self, url: str, payload: DeliveryPayload) -> DeliveryResult:
        """Deliver a payload, retrying once on failure.

        Args:
            url: Destination endpoint.
            payload: Event body; the same instance is sent on every attempt.

        Returns:
            ``Sent successfully (<status>)`` on a 2xx response; otherwise the
            last failure's message ("Request timeout", "HTTP <status>: ...",
            or the transport error description).
        """
        attempt = DeliveryAttempt(destination_url=url, payload=payload)
        body = payload.to_json()

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_fixed(self._retry_delay),
            retry=retry_if_exception_type(DeliveryError),
            before_sleep=_log_retry,
            sleep=self._sleep,
            reraise=True,
        )

        status_code = 0
        try:
            async for retry_attempt in retrying:
                with retry_attempt:
                    attempt.attempt_number = retry_attempt.retry_state.attempt_number
                    status_code = await self._attempt(attempt, body)
        except DeliveryError as e:
            logger.warning(
                "Webhook delivery to %s failed after %d attempts: %s",
                url,
                attempt.attempt_number,
                e.message,
            )
            return DeliveryResult.failed(e.message)
        except Exception as e:
            logger.exception("Unexpected webhook delivery error: %s", e)
            return DeliveryResult.failed(str(e) or "Network error")

        logger.info("Webhook sent to %s (status %d)", url, status_code)
        return DeliveryResult.ok(f"Sent successfully ({status_code})")

    async def _attempt(self, attempt: DeliveryAttempt, body: str) -> int:
        """Make one POST and return its status code.

        Raises:
            DeliveryTimeout: The deadline fired before a response arrived.
            TransportError: The request could not be sent or completed.
            HTTPError: The response status was outside [200, 300).
        """
        try:
            return await self._post(attempt.destination_url, body)
        except DeliveryError as e:
            logger.warning(
                "Webhook attempt %d to %s failed: %s",
                attempt.attempt_number,
                attempt.destination_url,
                e.message,
            )
            raise

    async def _post(self, url: str, body: str) -> int:
        try:
            async with asyncio.timeout(self._timeout):
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.post(url, content=body, headers=JSON_HEADERS)
        except (TimeoutError, httpx.TimeoutException) as e:
            raise DeliveryTimeout() from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(str(e)) from e

        if not response.is_success:
            raise HTTPError(response.status_code, response.reason_phrase)
        return response.status_code
