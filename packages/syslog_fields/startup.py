"""Startup wiring: apply runtime settings, then hand back a validator."""

from __future__ import annotations

from typing import TextIO

from packages.syslog_shared.config import FieldSettings, load_settings
from packages.syslog_shared.logging import configure_logging

from .validators import FieldValidator, build_validator


def configure_from_settings(
    settings: FieldSettings | None = None,
    *,
    stream: TextIO | None = None,
) -> FieldValidator:
    """Configure validation logging and build a validator from ``settings``.

    Settings are loaded with the standard precedence cascade when omitted.
    """
    resolved = settings if settings is not None else load_settings()
    configure_logging(resolved.logging, stream=stream)
    return build_validator(resolved)
