"""Structured logging for intention-webhook.

structlog sits on top of the standard library so that module loggers created
with ``logging.getLogger(__name__)`` and structlog loggers share one output.
Stdlib records (including httpx's request lines) are rendered through a
``ProcessorFormatter`` on the root handler, so both kinds of record pass the
same processor chain. Two renderers are available: JSON lines for production
and a colored console for local development.

Destination URLs often carry tokens in their query string (many hosted
webhook receivers work that way), so rendered events pass through a processor
that strips query strings from any ``url``/``destination`` field and from
http(s) URLs inside the message itself.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import TYPE_CHECKING, TextIO
from urllib.parse import urlsplit, urlunsplit

import structlog

if TYPE_CHECKING:
    from structlog.typing import EventDict, Processor, WrappedLogger

_URL_FIELDS = ("url", "destination", "destination_url")

_URL_WITH_QUERY = re.compile(r"(https?://[^\s?#\"']+)\?[^\s#\"']*")

_configured = False
_handler: logging.Handler | None = None


def _strip_url_query(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def redact_destination(
    _logger: WrappedLogger,
    _method: str,
    event_dict: EventDict,
) -> EventDict:
    """Drop query strings from destination URLs before rendering."""
    for key in _URL_FIELDS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = _strip_url_query(value)
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = _URL_WITH_QUERY.sub(r"\1", event)
    return event_dict


def configure_logging(
    level: str = "INFO",
    format: str = "json",
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging.

    Meant to be called once by the application entry point. Calling it again
    replaces the handler installed by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format: "json" for production, "text" for a colored console.
        stream: Where rendered lines go. Defaults to stdout.

    Example:
        ```python
        from intention_webhook.logging import configure_logging, get_logger

        configure_logging(level="DEBUG", format="text")
        log = get_logger(__name__)
        log.info("webhook_saved", enabled=True, url="https://hooks.example.com/in")
        ```
    """
    global _configured, _handler

    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        redact_destination,
    ]

    if format.lower() == "json":
        renderers: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=stream is None)]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *renderers,
            ],
        )
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(log_level)

    _handler = handler
    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, configuring defaults on first use."""
    if not _configured:
        configure_logging()

    return structlog.get_logger(name)  # type: ignore[no-any-return]


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log messages.

    Useful for tagging every line of one send with its caller, e.g.
    ``bind_context(caller="widget")``.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """Remove specific keys from the logging context."""
    structlog.contextvars.unbind_contextvars(*keys)
