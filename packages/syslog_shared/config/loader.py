"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI / init params
2) Environment variables
3) ``~/.config/syslog-fields/fields.yaml`` (or an explicit path)
4) Built-in model defaults

Environment variable format:
- Prefix: ``SYSLOG_FIELDS_``
- Nested keys: ``__`` separator
- Example: ``SYSLOG_FIELDS_LIMITS__HOSTNAME=128`` -> ``limits.hostname = 128``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import DEFAULT_CONFIG_PATH, FieldSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> FieldSettings:
    """Load settings by applying the standard precedence cascade.

    A missing YAML file is treated as empty.
    """
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    class _BoundFieldSettings(FieldSettings):
        model_config = SettingsConfigDict(yaml_file=resolved)

    return _BoundFieldSettings(**dict(cli_params or {}))
