"""Exception hierarchy for intention-webhook.

Provides structured exceptions for error handling throughout the codebase.
All exceptions inherit from IntentionWebhookError for easy catching.

The delivery family (DeliveryError and subclasses) describes why a single
network attempt failed. Those errors are consumed by the retry loop and never
escape the public delivery boundary; callers only ever see a DeliveryResult.
"""

from __future__ import annotations


class IntentionWebhookError(Exception):
    """Base exception for all intention-webhook errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
    """

    code: str = "intention_webhook_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """Convert exception to API-friendly dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class StoreUnavailable(IntentionWebhookError):
    """Persistence read or write failed.

    Raised when the key-value capability reports an error, or when the
    stored webhook record cannot be parsed. Never retried.
    """

    code: str = "store_unavailable"


class ValidationError(IntentionWebhookError):
    """Invalid input provided.

    Raised when a destination URL is missing or uses a disallowed scheme.

    Attributes:
        field: The field that failed validation.
        message: Description of the validation failure.
    """

    code: str = "validation_error"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")

    def to_dict(self) -> dict[str, object]:
        """Convert exception to API-friendly dictionary."""
        return {
            "error": {
                "code": self.code,
                "field": self.field,
                "message": self.message,
            }
        }


class ConfigurationError(IntentionWebhookError):
    """Configuration error.

    Raised when settings are missing or inconsistent.
    """

    code: str = "configuration_error"


class DeliveryError(IntentionWebhookError):
    """A single delivery attempt failed.

    Every subclass is retryable and shares the same retry budget.
    """

    code: str = "delivery_error"


class DeliveryTimeout(DeliveryError):
    """The attempt did not complete before its deadline."""

    code: str = "timeout"

    def __init__(self, message: str = "Request timeout") -> None:
        super().__init__(message)


class TransportError(DeliveryError):
    """Connection-level failure (DNS, refused connection, TLS...)."""

    code: str = "transport_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Network error")


class HTTPError(DeliveryError):
    """A response was received with a status outside [200, 300).

    Attributes:
        status_code: HTTP status returned by the endpoint.
        reason: Reason phrase returned with the status.
    """

    code: str = "http_error"

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code}: {reason}")

    def to_dict(self) -> dict[str, object]:
        """Convert exception to API-friendly dictionary."""
        return {
            "error": {
                "code": self.code,
                "status_code": self.status_code,
                "message": self.message,
            }
        }
