"""Public API for shared syslog-fields configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_LOCALE,
    FieldLimits,
    FieldSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LOCALE",
    "FieldLimits",
    "FieldSettings",
    "LoggingSettings",
    "load_settings",
]
