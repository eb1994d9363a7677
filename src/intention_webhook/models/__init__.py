"""Data models for intention-webhook.

Persisted:
    - WebhookConfig: The single destination record

Delivery:
    - DeliveryPayload: Immutable event body, one per send
    - DeliveryResult: Terminal outcome returned to callers
    - DeliveryAttempt: Per-call attempt state

Callers:
    - StatusFeedback: Message a caller renders after an action
"""

from .webhook import (
    DeliveryAttempt,
    DeliveryPayload,
    DeliveryResult,
    FeedbackLevel,
    StatusFeedback,
    WebhookConfig,
)

__all__ = [
    "DeliveryAttempt",
    "DeliveryPayload",
    "DeliveryResult",
    "FeedbackLevel",
    "StatusFeedback",
    "WebhookConfig",
]
