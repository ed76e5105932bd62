"""Per-field-kind validators composing the length and charset checks.

Every validator runs the length check first and only scans characters when
the length is within bounds, so a single call reports at most one error.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from packages.syslog_shared.config import FieldLimits, FieldSettings

from .charset import validate_name_chars, validate_printable_ascii
from .exceptions import raise_for_result
from .kinds import CharsetPolicy, FieldKind, policy_for
from .length import FieldValue, check_length, to_bytes
from .result import ValidationResult

DEFAULT_LIMITS = FieldLimits()

_SCANNERS: Mapping[CharsetPolicy, Callable[..., ValidationResult]] = {
    CharsetPolicy.PRINTABLE_ASCII: validate_printable_ascii,
    CharsetPolicy.RESTRICTED_NAME: validate_name_chars,
}


def validate_length(
    kind: FieldKind | str,
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Check only the byte length of ``value`` against its kind's maximum."""
    field_kind = FieldKind(kind)
    max_length = (limits or DEFAULT_LIMITS).max_length(field_kind)
    return check_length(value, max_length, kind=field_kind, locale=locale)


def validate(
    kind: FieldKind | str,
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Validate ``value`` as a field of ``kind``.

    Returns ``Ok(length)`` when both the length bound and the kind's charset
    policy hold, otherwise the first failure found.
    """
    field_kind = FieldKind(kind)
    data = to_bytes(value)
    result = validate_length(field_kind, data, limits=limits, locale=locale)
    if not result.ok:
        return result
    scanner = _SCANNERS[policy_for(field_kind)]
    return scanner(data, result.length, kind=field_kind, locale=locale)


def require(
    kind: FieldKind | str,
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> int:
    """Validate ``value`` and return its byte length, raising on failure.

    Raises ``LengthExceededError`` or ``InvalidEncodingError``.
    """
    return raise_for_result(validate(kind, value, limits=limits, locale=locale))


def validate_app_name(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Validate an application name."""
    return validate(FieldKind.APP_NAME, value, limits=limits, locale=locale)


def validate_app_name_length(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Check only the byte length of an application name."""
    return validate_length(FieldKind.APP_NAME, value, limits=limits, locale=locale)


def validate_hostname(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Validate a hostname."""
    return validate(FieldKind.HOSTNAME, value, limits=limits, locale=locale)


def validate_hostname_length(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Check only the byte length of a hostname."""
    return validate_length(FieldKind.HOSTNAME, value, limits=limits, locale=locale)


def validate_msgid(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Validate a message id."""
    return validate(FieldKind.MSGID, value, limits=limits, locale=locale)


def validate_msgid_length(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Check only the byte length of a message id."""
    return validate_length(FieldKind.MSGID, value, limits=limits, locale=locale)


def validate_procid(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Validate a process id."""
    return validate(FieldKind.PROCID, value, limits=limits, locale=locale)


def validate_procid_length(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Check only the byte length of a process id."""
    return validate_length(FieldKind.PROCID, value, limits=limits, locale=locale)


def validate_element_name(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Validate a structured-data element name."""
    return validate(FieldKind.ELEMENT_NAME, value, limits=limits, locale=locale)


def validate_element_name_length(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Check only the byte length of a structured-data element name."""
    return validate_length(FieldKind.ELEMENT_NAME, value, limits=limits, locale=locale)


def validate_param_name(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Validate a structured-data parameter name."""
    return validate(FieldKind.PARAM_NAME, value, limits=limits, locale=locale)


def validate_param_name_length(
    value: FieldValue,
    *,
    limits: FieldLimits | None = None,
    locale: str | None = None,
) -> ValidationResult:
    """Check only the byte length of a structured-data parameter name."""
    return validate_length(FieldKind.PARAM_NAME, value, limits=limits, locale=locale)


class FieldValidator:
    """Validators bound to one set of limits and one message locale."""

    def __init__(
        self,
        *,
        limits: FieldLimits | None = None,
        locale: str | None = None,
    ) -> None:
        self._limits = limits or DEFAULT_LIMITS
        self._locale = locale

    @property
    def limits(self) -> FieldLimits:
        """Return the maximum lengths this validator enforces."""
        return self._limits

    @property
    def locale(self) -> str | None:
        """Return the locale error messages are rendered in."""
        return self._locale

    def validate(self, kind: FieldKind | str, value: FieldValue) -> ValidationResult:
        """Validate one value with the bound limits and locale."""
        return validate(kind, value, limits=self._limits, locale=self._locale)

    def validate_length(
        self, kind: FieldKind | str, value: FieldValue
    ) -> ValidationResult:
        """Check only the length of one value with the bound limits."""
        return validate_length(kind, value, limits=self._limits, locale=self._locale)

    def validate_many(
        self,
        values: Mapping[FieldKind | str, FieldValue]
        | Iterable[tuple[FieldKind | str, FieldValue]],
    ) -> dict[FieldKind, ValidationResult]:
        """Validate several fields independently.

        Accepts a mapping or a sequence of ``(kind, value)`` pairs. A rejected
        field does not stop the others from being checked, so the
        caller can drop or default just the failing ones. Raises ``ValueError``
        when two entries name the same field kind.
        """
        pairs = values.items() if isinstance(values, Mapping) else values
        results: dict[FieldKind, ValidationResult] = {}
        for kind, value in pairs:
            field_kind = FieldKind(kind)
            if field_kind in results:
                raise ValueError(f"field kind given more than once: {field_kind.value}")
            results[field_kind] = self.validate(field_kind, value)
        return results

    def require(self, kind: FieldKind | str, value: FieldValue) -> int:
        """Validate one value and return its length, raising on failure."""
        return raise_for_result(self.validate(kind, value))


def build_validator(settings: FieldSettings) -> FieldValidator:
    """Build a validator from loaded runtime settings."""
    return FieldValidator(limits=settings.limits, locale=settings.locale)
