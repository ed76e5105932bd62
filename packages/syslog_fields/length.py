"""Byte-length checks for field values."""

from __future__ import annotations

from packages.syslog_shared.errors import codes, validation_error
from packages.syslog_shared.logging import fields, get_logger, rejection_context

from . import l10n
from .kinds import FieldKind
from .result import ValidationResult, failure, success

_LOGGER = get_logger(__name__)

FieldValue = str | bytes | bytearray | memoryview


def to_bytes(value: FieldValue) -> bytes:
    """Return the wire bytes of a field value.

    ``str`` values are measured as UTF-8, the encoding RFC 5424 header
    fields are written in. Lone surrogates are passed through as their raw
    bytes so the charset scan rejects them instead of the encoder raising.
    """
    if isinstance(value, str):
        return value.encode("utf-8", errors="surrogatepass")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"field value must be str or bytes, not {type(value).__name__}")


def byte_length(value: FieldValue) -> int:
    """Return the length of a field value in bytes."""
    if isinstance(value, (bytes, bytearray)):
        return len(value)
    return len(to_bytes(value))


def check_length(
    value: FieldValue,
    max_length: int,
    *,
    kind: FieldKind | str | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Check that ``value`` is at most ``max_length`` bytes long.

    The computed length is returned in the result whether or not the check
    passes. A negative ``max_length`` raises ``ValueError``.
    """
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")
    field_kind = FieldKind(kind).value if kind is not None else None
    length = byte_length(value)
    if length <= max_length:
        return success(length)

    error = validation_error(
        l10n.render_message(
            l10n.STRING_TOO_LONG, locale, length=length, max_length=max_length
        ),
        code=codes.ARGUMENT_TOO_BIG,
        metadata={
            "message_key": l10n.STRING_TOO_LONG,
            fields.LENGTH: length,
            fields.MAX_LENGTH: max_length,
            "code_type": l10n.render_message(l10n.STRING_LENGTH_CODE_TYPE, locale),
            fields.FIELD_KIND: field_kind,
        },
    )
    with rejection_context(field_kind=field_kind, error_code=error.code):
        _LOGGER.debug(
            "Field rejected: length=%s max_length=%s", length, max_length
        )
    return failure(length, error)
