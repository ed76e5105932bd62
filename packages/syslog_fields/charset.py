"""Character-set scanners for printable text and structured-data names.

Both scanners walk ``[0, length)`` of an already length-checked value and stop
at the first byte outside their permitted set.
"""

from __future__ import annotations

from packages.syslog_shared.errors import codes, validation_error
from packages.syslog_shared.logging import fields, get_logger, rejection_context

from . import l10n
from .kinds import FieldKind
from .length import FieldValue, to_bytes
from .result import ValidationResult, failure, success

_LOGGER = get_logger(__name__)

PRINTABLE_MIN = 33
PRINTABLE_MAX = 126

# SD-NAME delimiters: '=' separates a param name from its value, ']' closes an
# element and '"' quotes the value.
RESERVED_NAME_BYTES = frozenset(b'=]"')

PRINTABLE_ASCII_ROLE = "printable ascii"
IDENTIFIER_ROLE = "identifier"


def first_invalid_printable(data: bytes, length: int | None = None) -> int | None:
    """Return the offset of the first byte outside [33, 126], if any."""
    for index in range(_scan_end(data, length)):
        byte = data[index]
        if byte < PRINTABLE_MIN or byte > PRINTABLE_MAX:
            return index
    return None


def first_invalid_name(data: bytes, length: int | None = None) -> int | None:
    """Return the offset of the first byte not allowed in an SD name, if any."""
    for index in range(_scan_end(data, length)):
        byte = data[index]
        if byte < PRINTABLE_MIN or byte > PRINTABLE_MAX or byte in RESERVED_NAME_BYTES:
            return index
    return None


def validate_printable_ascii(
    value: FieldValue,
    length: int | None = None,
    *,
    kind: FieldKind | str | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Require every byte of ``value`` to be printable ASCII."""
    data = to_bytes(value)
    end = _scan_end(data, length)
    position = first_invalid_printable(data, end)
    if position is None:
        return success(end)
    return _reject(data, end, position, PRINTABLE_ASCII_ROLE, kind=kind, locale=locale)


def validate_name_chars(
    value: FieldValue,
    length: int | None = None,
    *,
    kind: FieldKind | str | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Require every byte of ``value`` to be legal in an SD element/param name."""
    data = to_bytes(value)
    end = _scan_end(data, length)
    position = first_invalid_name(data, end)
    if position is None:
        return success(end)
    return _reject(data, end, position, IDENTIFIER_ROLE, kind=kind, locale=locale)


def _scan_end(data: bytes, length: int | None) -> int:
    """Resolve the scan bound, defaulting to the full value."""
    if length is None:
        return len(data)
    if length < 0 or length > len(data):
        raise ValueError(
            f"length must be between 0 and {len(data)} for this value, got {length}"
        )
    return length


def _reject(
    data: bytes,
    length: int,
    position: int,
    role: str,
    *,
    kind: FieldKind | str | None,
    locale: str | None,
) -> ValidationResult:
    """Build the invalid-encoding failure for the byte at ``position``."""
    field_kind = FieldKind(kind).value if kind is not None else None
    error = validation_error(
        l10n.render_message(l10n.FORMAT_ERROR, locale, role=role),
        code=codes.INVALID_ENCODING,
        metadata={
            "message_key": l10n.FORMAT_ERROR,
            fields.ROLE: role,
            fields.POSITION: position,
            "byte": data[position],
            fields.LENGTH: length,
            fields.FIELD_KIND: field_kind,
        },
    )
    with rejection_context(field_kind=field_kind, error_code=error.code):
        _LOGGER.debug("Field rejected: role=%s position=%s", role, position)
    return failure(length, error)
