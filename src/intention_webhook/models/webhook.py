"""Webhook models for intention notifications.

Provides the persisted destination record, the event payload posted to the
destination, and the result handed back to callers.
"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FeedbackLevel = Literal["success", "error", "info"]


class WebhookConfig(BaseModel):
    """The single persisted webhook destination.

    The model does not validate ``url``: callers validate before saving
    (see ``intention_webhook.webhooks.validation``), and a record that was
    saved disabled may legitimately hold any text the user typed.

    Attributes:
        enabled: Whether intentions are forwarded at all.
        url: Destination endpoint, empty when never configured.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=False, description="Whether delivery is enabled")
    url: str = Field(default="", description="Destination endpoint")

    @property
    def is_active(self) -> bool:
        """True when a send would reach the network."""
        return self.enabled and bool(self.url)


class DeliveryPayload(BaseModel):
    """Event body posted to the destination.

    Built once per send and reused unchanged for the retry, so the
    timestamp reflects when the user submitted, not when the POST landed.

    Attributes:
        intention: Text the user typed.
        page_url: Page the user was on; serialized as ``url``.
        timestamp: When the send started (UTC).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    intention: str = Field(description="Intention text")
    page_url: str = Field(serialization_alias="url", description="Page URL")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the send started",
    )

    def to_json(self) -> str:
        """Serialize to the wire format."""
        return self.model_dump_json(by_alias=True)


class DeliveryResult(BaseModel):
    """Terminal outcome of a send, as shown to the user."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "DeliveryResult":
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, message: str) -> "DeliveryResult":
        return cls(success=False, message=message)


class DeliveryAttempt(BaseModel):
    """State of one ``deliver`` call; discarded when the call resolves."""

    model_config = ConfigDict(extra="forbid")

    destination_url: str
    payload: DeliveryPayload
    attempt_number: int = Field(default=1, ge=1)


class StatusFeedback(BaseModel):
    """What a caller renders after an action.

    Attributes:
        level: Visual tone of the message.
        text: Message shown to the user.
        duration_seconds: How long the message stays; None keeps it until
            the next action overwrites it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: FeedbackLevel
    text: str
    duration_seconds: float | None = Field(default=None, gt=0.0)

    @property
    def is_transient(self) -> bool:
        return self.duration_seconds is not None


__all__ = [
    "DeliveryAttempt",
    "DeliveryPayload",
    "DeliveryResult",
    "FeedbackLevel",
    "StatusFeedback",
    "WebhookConfig",
]
