"""Logging setup for field validation diagnostics.

Validators log through the ``packages.syslog_fields`` logger hierarchy. This
module attaches one stdout handler to that hierarchy, configured from
``LoggingSettings``, and leaves the root logger to the host application.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from packages.syslog_shared.config import LoggingSettings

from . import fields
from .context import bind_context, clear_context, get_context

VALIDATION_LOGGER = "packages.syslog_fields"
_HANDLER_NAME = "syslog_fields_stdout"

# Rendered ahead of the remaining context keys in plain output.
_LEADING_KEYS = (fields.FIELD_KIND, fields.ERROR_CODE)


class ContextFilter(logging.Filter):
    """Attach the current structured context to each log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, "context", get_context())
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record: core fields, then bound context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(_record_context(record))
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"), ensure_ascii=False)


class PlainFormatter(logging.Formatter):
    """Single-line text output with the rejected field kind and code first."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = _record_context(record)
        if not context:
            return message
        ordered = [key for key in _LEADING_KEYS if key in context]
        ordered.extend(sorted(key for key in context if key not in _LEADING_KEYS))
        return f"{message} " + " ".join(f"{key}={context[key]}" for key in ordered)


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach the validation log handler described by ``settings``.

    A handler installed by an earlier call is replaced, and the ``service``
    and ``environment`` context fields are re-seeded from ``settings``.
    """
    resolved = settings if settings is not None else LoggingSettings()
    logger = logging.getLogger(VALIDATION_LOGGER)
    for existing in [item for item in logger.handlers if item.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(resolved.level)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if resolved.json_output else PlainFormatter())
    logger.addHandler(handler)
    logger.setLevel(resolved.level)

    clear_context(fields.SERVICE, fields.ENVIRONMENT)
    bind_context(
        **{fields.SERVICE: resolved.service, fields.ENVIRONMENT: resolved.environment}
    )
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)


def _record_context(record: logging.LogRecord) -> dict[str, str]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}
