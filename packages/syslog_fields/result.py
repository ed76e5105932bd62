"""Tagged validation result returned by every check."""

from __future__ import annotations

from dataclasses import dataclass

from packages.syslog_shared.errors import ErrorDetail


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call: ``Ok(length)`` or ``Err(error)``.

    ``length`` is the computed byte length of the input and is populated on
    failure as well, so callers can report it without rescanning.
    """

    length: int
    error: ErrorDetail | None = None

    @property
    def ok(self) -> bool:
        """Return True when no error is present."""
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


def success(length: int) -> ValidationResult:
    """Build a successful result for a value of ``length`` bytes."""
    return ValidationResult(length=length)


def failure(length: int, error: ErrorDetail) -> ValidationResult:
    """Build a failed result carrying one error."""
    return ValidationResult(length=length, error=error)
