"""Tests for the settings page and intention widget controllers."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from conftest import HOOK_URL, PAGE_URL, FailingStore, RecordingTransport

from intention_webhook.exceptions import StoreUnavailable
from intention_webhook.models import DeliveryResult, WebhookConfig
from intention_webhook.service import WebhookService
from intention_webhook.storage import ConfigStore, InMemoryStore
from intention_webhook.ui import IntentionWidget, SettingsController
from intention_webhook.ui import settings as settings_ui
from intention_webhook.ui import widget as widget_ui
from intention_webhook.webhooks import RetryingDeliverer


def service_over(store, transport: RecordingTransport | None = None) -> WebhookService:
    deliverer = RetryingDeliverer(
        transport=transport or RecordingTransport(200),
        sleep=AsyncMock(return_value=None),
    )
    return WebhookService(ConfigStore(store), deliverer)


class TestSettingsController:
    """Tests for SettingsController."""

    @pytest.mark.asyncio
    async def test_load_defaults(self) -> None:
        """Loading an empty store should give the default config."""
        controller = SettingsController(service_over(InMemoryStore()))
        assert await controller.load() == WebhookConfig()

    @pytest.mark.asyncio
    async def test_load_failure_propagates(self) -> None:
        """Load errors should reach the page as StoreUnavailable."""
        controller = SettingsController(service_over(FailingStore()))
        with pytest.raises(StoreUnavailable):
            await controller.load()

    @pytest.mark.asyncio
    async def test_save_valid(self) -> None:
        """A valid URL should be stored and reported for 3 seconds."""
        store = InMemoryStore()
        controller = SettingsController(service_over(store))

        feedback = await controller.save(True, f"  {HOOK_URL}  ")

        assert feedback.level == "success"
        assert feedback.text == settings_ui.SAVED
        assert feedback.duration_seconds == 3.0
        assert await store.get("webhook") == {"enabled": True, "url": HOOK_URL}

    @pytest.mark.asyncio
    async def test_save_missing_url(self) -> None:
        """An empty URL should be rejected without writing."""
        store = InMemoryStore()
        controller = SettingsController(service_over(store))

        feedback = await controller.save(True, "   ")

        assert feedback.level == "error"
        assert feedback.text == settings_ui.MISSING_URL
        assert feedback.duration_seconds is None
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_save_invalid_scheme(self) -> None:
        """A non-http(s) URL should be rejected without writing."""
        store = InMemoryStore()
        controller = SettingsController(service_over(store))

        feedback = await controller.save(True, "ftp://hooks.example.com/in")

        assert feedback.level == "error"
        assert feedback.text == settings_ui.INVALID_URL
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_save_store_failure(self) -> None:
        """A failed write should be reported and stay on screen."""
        controller = SettingsController(service_over(FailingStore(fail_get=False)))

        feedback = await controller.save(True, HOOK_URL)

        assert feedback.level == "error"
        assert feedback.text == settings_ui.SAVE_FAILED
        assert feedback.duration_seconds is None

    @pytest.mark.asyncio
    async def test_disable_keeps_url(self) -> None:
        """Disabling should persist enabled=False and keep the URL."""
        store = InMemoryStore({"webhook": {"enabled": True, "url": HOOK_URL}})
        controller = SettingsController(service_over(store))

        feedback = await controller.disable(HOOK_URL)

        assert feedback.level == "info"
        assert feedback.text == settings_ui.DISABLED
        assert feedback.duration_seconds == 2.0
        assert await store.get("webhook") == {"enabled": False, "url": HOOK_URL}

    @pytest.mark.asyncio
    async def test_disable_does_not_validate(self) -> None:
        """Disabling stores whatever URL is in the form."""
        store = InMemoryStore()
        controller = SettingsController(service_over(store))

        feedback = await controller.disable("half-typed")

        assert feedback.level == "info"
        assert await store.get("webhook") == {"enabled": False, "url": "half-typed"}

    @pytest.mark.asyncio
    async def test_disable_store_failure(self) -> None:
        """Disabling must not report success when the write fails."""
        controller = SettingsController(service_over(FailingStore(fail_get=False)))

        feedback = await controller.disable(HOOK_URL)

        assert feedback.level == "error"
        assert feedback.text == settings_ui.DISABLE_FAILED

    @pytest.mark.asyncio
    async def test_send_test_uses_shared_path(self) -> None:
        """The test button should go through WebhookService.send."""
        store = InMemoryStore({"webhook": {"enabled": True, "url": HOOK_URL}})
        transport = RecordingTransport(204)
        controller = SettingsController(service_over(store, transport))

        feedback = await controller.send_test(PAGE_URL)

        assert feedback.level == "success"
        assert feedback.text == "Sent successfully (204)"
        assert feedback.duration_seconds is None
        assert transport.call_count == 1

    @pytest.mark.asyncio
    async def test_send_test_failure(self) -> None:
        """A failing test send should show the failure message."""
        store = InMemoryStore({"webhook": {"enabled": True, "url": HOOK_URL}})
        transport = RecordingTransport(httpx.ConnectError("Connection refused"))
        controller = SettingsController(service_over(store, transport))

        feedback = await controller.send_test()

        assert feedback.level == "error"
        assert feedback.text == "Connection refused"


class TestIntentionWidget:
    """Tests for IntentionWidget."""

    @pytest.mark.asyncio
    async def test_blank_intention_is_ignored(self) -> None:
        """Blank intentions should not start a delivery."""
        service = MagicMock()
        service.send = AsyncMock()
        widget = IntentionWidget(service)

        assert widget.submit("   ", PAGE_URL) is None
        assert widget.pending == 0
        service.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_submit_does_not_block(self) -> None:
        """submit should return before delivery finishes."""
        release = asyncio.Event()

        async def slow_send(intention: str, page_url: str) -> DeliveryResult:
            await release.wait()
            return DeliveryResult.ok("Sent successfully (200)")

        service = MagicMock()
        service.send = slow_send
        widget = IntentionWidget(service)

        task = widget.submit("focus", PAGE_URL)

        assert task is not None
        assert not task.done()
        assert widget.pending == 1

        release.set()
        await widget.wait_pending()
        assert widget.pending == 0
        assert task.result().success is True

    @pytest.mark.asyncio
    async def test_success_indicator(self) -> None:
        """A delivered intention should show a 2.5s success indicator."""
        store = InMemoryStore({"webhook": {"enabled": True, "url": HOOK_URL}})
        transport = RecordingTransport(200)
        seen = []
        widget = IntentionWidget(service_over(store, transport), on_status=seen.append)

        task = widget.submit("write tests", PAGE_URL)
        await task

        assert widget.last_status is not None
        assert widget.last_status.level == "success"
        assert widget.last_status.duration_seconds == widget_ui.SUCCESS_INDICATOR_SECONDS
        assert seen == [widget.last_status]
        assert b'"intention":"write tests"' in transport.requests[0].content

    @pytest.mark.asyncio
    async def test_intention_text_sent_unchanged(self) -> None:
        """Surrounding whitespace is part of what the user typed and goes out as is."""
        store = InMemoryStore({"webhook": {"enabled": True, "url": HOOK_URL}})
        transport = RecordingTransport(200)
        widget = IntentionWidget(service_over(store, transport))

        await widget.submit("  read  ", PAGE_URL)

        assert json.loads(transport.requests[0].content)["intention"] == "  read  "

    @pytest.mark.asyncio
    async def test_error_indicator(self) -> None:
        """A failed delivery should show a 3s error indicator."""
        store = InMemoryStore({"webhook": {"enabled": True, "url": HOOK_URL}})
        transport = RecordingTransport(500)
        widget = IntentionWidget(service_over(store, transport))

        await widget.submit("write tests", PAGE_URL)

        assert widget.last_status is not None
        assert widget.last_status.level == "error"
        assert widget.last_status.text == "HTTP 500: Internal Server Error"
        assert widget.last_status.duration_seconds == widget_ui.ERROR_INDICATOR_SECONDS
        assert transport.call_count == 2

    @pytest.mark.asyncio
    async def test_disabled_webhook_shows_nothing(self) -> None:
        """The disabled short-circuit should not show an indicator."""
        seen = []
        widget = IntentionWidget(service_over(InMemoryStore()), on_status=seen.append)

        result = await widget.submit("write tests", PAGE_URL)

        assert result.success is True
        assert widget.last_status is None
        assert seen == []

    @pytest.mark.asyncio
    async def test_concurrent_submissions(self) -> None:
        """Concurrent submissions should each deliver once."""
        store = InMemoryStore({"webhook": {"enabled": True, "url": HOOK_URL}})
        transport = RecordingTransport(200)
        widget = IntentionWidget(service_over(store, transport))

        widget.submit("first", PAGE_URL)
        widget.submit("second", PAGE_URL)
        await widget.wait_pending()

        assert transport.call_count == 2
        bodies = sorted(r.content for r in transport.requests)
        assert b'"intention":"first"' in bodies[0]
        assert b'"intention":"second"' in bodies[1]
