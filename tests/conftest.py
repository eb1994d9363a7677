"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

# Add tests directory to path so helpers can be imported
tests_dir = Path(__file__).parent
if str(tests_dir) not in sys.path:
    sys.path.insert(0, str(tests_dir))

from intention_webhook.service import WebhookService
from intention_webhook.storage import ConfigStore, InMemoryStore
from intention_webhook.webhooks import RetryingDeliverer

HOOK_URL = "https://hooks.example.com/in"
PAGE_URL = "https://news.example.com/a"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replays scripted outcomes and records requests.

    Each outcome is either a status code (int) or an exception instance to
    raise. The last outcome repeats once the script runs out.
    """

    def __init__(self, *outcomes: int | Exception) -> None:
        self.outcomes: list[int | Exception] = list(outcomes) or [200]
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(outcome, text="ok" if outcome < 400 else "nope")

    @property
    def call_count(self) -> int:
        return len(self.requests)


class FailingStore:
    """KeyValueStore whose reads and/or writes always fail."""

    def __init__(self, fail_get: bool = True, fail_set: bool = True) -> None:
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.data: dict[str, Any] = {}

    async def get(self, key: str) -> Any | None:
        if self.fail_get:
            raise OSError("disk unavailable")
        return self.data.get(key)

    async def set(self, key: str, value: Any) -> None:
        if self.fail_set:
            raise OSError("disk unavailable")
        self.data[key] = value


@pytest.fixture
def memory_store() -> InMemoryStore:
    """Create an empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def config_store(memory_store: InMemoryStore) -> ConfigStore:
    """Create a ConfigStore over the in-memory store."""
    return ConfigStore(memory_store)


@pytest.fixture
def no_sleep() -> AsyncMock:
    """Replacement for the retry delay so tests do not wait."""
    return AsyncMock(return_value=None)


@pytest.fixture
def make_service(config_store: ConfigStore, no_sleep: AsyncMock):
    """Build a WebhookService whose network goes through a RecordingTransport."""

    def _make(transport: RecordingTransport, **deliverer_kwargs: Any) -> WebhookService:
        deliverer = RetryingDeliverer(transport=transport, sleep=no_sleep, **deliverer_kwargs)
        return WebhookService(config_store, deliverer)

    return _make
