"""Destination URL validation.

Uses the validators library for well-formedness and restricts the scheme to
http/https. Run before a URL is saved; ConfigStore itself stores whatever it
is given.
"""

from __future__ import annotations

from urllib.parse import urlparse

import validators

from intention_webhook.exceptions import ValidationError

ALLOWED_SCHEMES = frozenset({"http", "https"})


def validate_webhook_url(url: str) -> str:
    """Validate a destination URL typed by the user.

    Args:
        url: Raw input; surrounding whitespace is ignored.

    Returns:
        The stripped URL.

    Raises:
        ValidationError: If the URL is empty, not absolute, malformed, or
            uses a scheme other than http/https.
    """
    url = url.strip()
    if not url:
        raise ValidationError("url", "webhook URL is required")

    scheme = urlparse(url).scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        raise ValidationError("url", f"unsupported scheme {scheme or '(none)'!r}")

    # simple_host admits hosts without a TLD, e.g. http://localhost:8080/hook
    if not validators.url(url, simple_host=True):
        raise ValidationError("url", "not a valid URL")

    return url


def is_valid_webhook_url(url: str) -> bool:
    """Return True if validate_webhook_url would accept url."""
    try:
        validate_webhook_url(url)
    except ValidationError:
        return False
    return True
