"""Tests for settings-driven startup wiring."""

from __future__ import annotations

import json
import logging
from io import StringIO
from pathlib import Path
from typing import Iterator

import pytest

from packages.syslog_fields import FieldKind, configure_from_settings
from packages.syslog_shared.config import load_settings
from packages.syslog_shared.logging import VALIDATION_LOGGER, clear_context


@pytest.fixture(autouse=True)
def _reset_validation_logger() -> Iterator[None]:
    """Drop handlers and context installed by startup."""
    yield
    logger = logging.getLogger(VALIDATION_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    clear_context()


def test_configure_from_settings_wires_limits_locale_and_logging(tmp_path: Path) -> None:
    """Limits, locale and logging settings all take effect."""
    settings = load_settings(
        cli_params={
            "limits": {"msgid": 4},
            "locale": "fr-FR",
            "logging": {"level": "DEBUG", "service": "relay"},
        },
        config_path=tmp_path / "fields.yaml",
    )
    stream = StringIO()

    validator = configure_from_settings(settings, stream=stream)
    result = validator.validate(FieldKind.MSGID, "TOOLONG")

    assert validator.limits.msgid == 4
    assert result.error is not None
    assert result.error.message.startswith("la chaîne fournie est trop longue")
    record = json.loads(stream.getvalue().strip())
    assert record["level"] == "DEBUG"
    assert record["service"] == "relay"
    assert record["field_kind"] == "msgid"
    assert record["error_code"] == "ARGUMENT_TOO_BIG"


def test_configure_from_settings_respects_log_level(tmp_path: Path) -> None:
    """Rejections are not emitted when the configured level is above DEBUG."""
    settings = load_settings(
        cli_params={"logging": {"level": "WARNING"}},
        config_path=tmp_path / "fields.yaml",
    )
    stream = StringIO()

    validator = configure_from_settings(settings, stream=stream)

    assert validator.validate(FieldKind.HOSTNAME, "bad host").ok is False
    assert stream.getvalue() == ""
