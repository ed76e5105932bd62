"""Tests for localized validation messages."""

from __future__ import annotations

import pytest

from packages.syslog_fields import (
    FieldKind,
    render_error,
    render_message,
    supported_locales,
    validate,
)
from packages.syslog_fields.l10n import FORMAT_ERROR, STRING_TOO_LONG, resolve_locale
from packages.syslog_shared.errors import validation_error


def test_supported_locales_include_default() -> None:
    """The default locale always has a catalog."""
    assert "en-US" in supported_locales()
    assert supported_locales() == tuple(sorted(supported_locales()))


@pytest.mark.parametrize(
    ("requested", "resolved"),
    [
        (None, "en-US"),
        ("", "en-US"),
        ("fr-FR", "fr-FR"),
        ("fr_fr", "fr-FR"),
        ("fr-CA", "fr-FR"),
        ("de", "de-DE"),
        ("ja-JP", "en-US"),
    ],
)
def test_resolve_locale_falls_back(requested: str | None, resolved: str) -> None:
    """Exact tags win, then language matches, then the default."""
    assert resolve_locale(requested) == resolved


def test_render_message_translates_role_names() -> None:
    """Role names are localized along with the template."""
    assert render_message(FORMAT_ERROR, "fr-FR", role="identifier") == (
        "la chaîne fournie n'est pas un identifiant valide"
    )
    assert render_message(FORMAT_ERROR, role="printable ascii") == (
        "the provided string is not valid printable ascii"
    )


def test_render_message_rejects_unknown_keys() -> None:
    """Unknown message keys are a programming error."""
    with pytest.raises(KeyError):
        render_message("no_such_message")


def test_render_error_rerenders_from_metadata_only() -> None:
    """An error can be rendered in another locale without the original input."""
    result = validate(FieldKind.HOSTNAME, "h" * 300)
    assert result.error is not None
    assert result.error.metadata["message_key"] == STRING_TOO_LONG

    assert render_error(result.error, "de-DE") == (
        "die angegebene Zeichenkette ist zu lang (300 Bytes, "
        "erlaubt sind höchstens 255)"
    )
    assert render_error(result.error) == result.error.message


def test_render_error_keeps_message_without_key() -> None:
    """Errors from other sources keep their original message."""
    error = validation_error("something else")
    assert render_error(error, "es-ES") == "something else"
