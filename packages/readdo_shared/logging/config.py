"""Stdout logging configuration for Readdo ingestion processes.

Each record carries the bound context. The ``event`` field (schema compiled,
contract rejected, capture key resolved ...) is placed right after the
message so event streams stay greppable in both output modes.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from packages.readdo_shared.config.models import LoggingSettings

from . import fields
from .context import bind_context, clear_context, get_context


class ContextFilter(logging.Filter):
    """Attach the current logging context to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_context()
        return True


def _split_event(record: logging.LogRecord) -> tuple[str | None, dict[str, str]]:
    context = dict(getattr(record, "context", None) or {})
    return context.pop(fields.EVENT, None), context


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per line: core fields, event, then sorted context."""

    def format(self, record: logging.LogRecord) -> str:
        event, context = _split_event(record)
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        if event is not None:
            payload[fields.EVENT] = event
        payload.update(sorted(context.items()))
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable lines ending in ``[event] key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        parts = [super().format(record)]
        event, context = _split_event(record)
        if event is not None:
            parts.append(f"[{event}]")
        parts.extend(f"{key}={value}" for key, value in sorted(context.items()))
        return " ".join(parts)


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Install a single stdout handler on the root logger.

    Existing root handlers and any previously bound context are replaced, so
    reconfiguring never duplicates emissions or keeps a stale service name.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    clear_context()
    bind_context(**{fields.SERVICE: service or None, fields.ENVIRONMENT: environment or None})


def configure_logging_from_settings(settings: LoggingSettings) -> None:
    """Configure logging from the ``logging`` section of ``ReaddoSettings``."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
