"""Event payload construction."""

from __future__ import annotations

from datetime import UTC, datetime

from intention_webhook.models import DeliveryPayload


def build_payload(
    intention: str,
    page_url: str,
    timestamp: datetime | None = None,
) -> DeliveryPayload:
    """Assemble the event body for one send.

    Empty intentions pass through; deciding whether to send at all is the
    caller's job.

    Args:
        intention: Text the user typed.
        page_url: Page the user was on.
        timestamp: Send time; defaults to now (UTC).

    Returns:
        Immutable payload reused for every attempt of the send.
    """
    return DeliveryPayload(
        intention=intention,
        page_url=page_url,
        timestamp=timestamp or datetime.now(UTC),
    )
