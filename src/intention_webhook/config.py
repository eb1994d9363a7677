"""Configuration management for intention-webhook."""

import logging
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# Delivery defaults shared by every caller.
MAX_ATTEMPTS = 2
REQUEST_TIMEOUT_SECONDS = 10.0
RETRY_DELAY_SECONDS = 5.0
DEFAULT_STORAGE_KEY = "webhook"


class Settings(BaseSettings):
    """Configuration loaded from environment variables.

    All settings can be overridden with the ``INTENTION_WEBHOOK_`` prefix,
    e.g. ``INTENTION_WEBHOOK_RETRY_DELAY_SECONDS=2``.

    Attributes:
        request_timeout_seconds: Deadline for a single POST attempt.
        retry_delay_seconds: Fixed pause before the retry.
        max_attempts: Total attempts per send (initial + retries).
        storage_key: Key holding the webhook record in the key-value store.
        store_path: JSON file backing the store; in-memory when unset.
        log_level: Logging level.
        log_format: "json" for production, "text" for development.
    """

    request_timeout_seconds: float = Field(
        default=REQUEST_TIMEOUT_SECONDS,
        gt=0.0,
        le=120.0,
        description="Deadline for a single delivery attempt",
    )
    retry_delay_seconds: float = Field(
        default=RETRY_DELAY_SECONDS,
        ge=0.0,
        le=60.0,
        description="Fixed delay before retrying a failed attempt",
    )
    max_attempts: int = Field(
        default=MAX_ATTEMPTS,
        ge=1,
        le=5,
        description="Total delivery attempts, including the first",
    )
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        min_length=1,
        description="Key of the webhook record in the key-value store",
    )
    store_path: str | None = Field(
        default=None,
        description="Path of the JSON store file (in-memory store when unset)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )

    model_config = {
        "env_prefix": "INTENTION_WEBHOOK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @model_validator(mode="after")
    def _warn_if_budget_exceeds_typical_wait(self) -> "Settings":
        """Warn when the worst-case send takes longer than a minute."""
        worst_case = (
            self.request_timeout_seconds * self.max_attempts
            + self.retry_delay_seconds * (self.max_attempts - 1)
        )
        if worst_case > 60.0:
            logger.warning(
                "Worst-case webhook send takes %.1fs "
                "(timeout=%.1fs, attempts=%d, retry_delay=%.1fs)",
                worst_case,
                self.request_timeout_seconds,
                self.max_attempts,
                self.retry_delay_seconds,
            )
        return self


# Global settings instance
settings = Settings()
