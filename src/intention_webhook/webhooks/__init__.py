"""Webhook delivery for intention notifications.

Provides payload construction, destination validation, and delivery with a
per-attempt deadline and one fixed-delay retry.

Example:
    ```python
    from intention_webhook.webhooks import RetryingDeliverer, build_payload

    payload = build_payload("write tests", "https://news.example.com/a")
    result = await RetryingDeliverer().deliver("https://hooks.example.com/in", payload)
    ```
"""

from .delivery import RetryingDeliverer
from .payload import build_payload
from .validation import ALLOWED_SCHEMES, is_valid_webhook_url, validate_webhook_url

__all__ = [
    "ALLOWED_SCHEMES",
    "RetryingDeliverer",
    "build_payload",
    "is_valid_webhook_url",
    "validate_webhook_url",
]
