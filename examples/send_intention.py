"""Send an intention through a webhook stored in a local JSON file.

Run:
    python examples/send_intention.py https://hooks.example.com/in "read the RFC"

Set INTENTION_WEBHOOK_LOG_FORMAT=text for readable logs.
"""

import asyncio
import sys

from intention_webhook import Settings, WebhookService, configure_logging
from intention_webhook.ui import IntentionWidget, SettingsController


async def main(hook_url: str, intention: str) -> None:
    settings = Settings(store_path="intention-webhook.json")
    configure_logging(level=settings.log_level, format=settings.log_format)
    service = WebhookService.create(settings)

    feedback = await SettingsController(service).save(True, hook_url)
    print(f"settings: {feedback.text}")
    if feedback.level == "error":
        return

    widget = IntentionWidget(service, on_status=lambda s: print(f"widget: {s.text}"))
    widget.submit(intention, "https://news.example.com/a")
    await widget.wait_pending()


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1], sys.argv[2]))
