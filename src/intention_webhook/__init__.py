"""intention-webhook: forward browsing intentions to a webhook.

Whenever a user records a short "intention" while browsing, the configured
endpoint receives a JSON event. Delivery is bounded (10s per attempt, one
retry after 5s) and always resolves to a DeliveryResult.

Quick Start:
    from intention_webhook import WebhookService

    service = WebhookService.create()
    await service.config_store.save(True, "https://hooks.example.com/in")

    result = await service.send(
        intention="write tests",
        page_url="https://news.example.com/a",
    )
    # result.success, result.message == "Sent successfully (200)"

Wire format:
    POST <webhook url>
    Content-Type: application/json

    {"intention": "...", "url": "<page url>", "timestamp": "<ISO-8601>"}
"""

__version__ = "0.1.0"

# Configuration
from .config import Settings, settings

# Exceptions
from .exceptions import (
    ConfigurationError,
    DeliveryError,
    DeliveryTimeout,
    HTTPError,
    IntentionWebhookError,
    StoreUnavailable,
    TransportError,
    ValidationError,
)

# Logging
from .logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

# Models
from .models import (
    DeliveryPayload,
    DeliveryResult,
    StatusFeedback,
    WebhookConfig,
)

# Service
from .service import WebhookService

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Exceptions
    "IntentionWebhookError",
    "StoreUnavailable",
    "ValidationError",
    "ConfigurationError",
    "DeliveryError",
    "DeliveryTimeout",
    "TransportError",
    "HTTPError",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "unbind_context",
    # Models
    "WebhookConfig",
    "DeliveryPayload",
    "DeliveryResult",
    "StatusFeedback",
    # Service
    "WebhookService",
]
