"""Public logging API for syslog-fields.

Validation diagnostics go through Python's ``logging`` module under the
``packages.syslog_fields`` hierarchy, with structured context propagation.
"""

from .config import (
    VALIDATION_LOGGER,
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
)
from .context import bind_context, clear_context, get_context, log_context, rejection_context

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "ContextFilter",
    "get_context",
    "get_logger",
    "JsonFormatter",
    "log_context",
    "PlainFormatter",
    "rejection_context",
    "VALIDATION_LOGGER",
]
