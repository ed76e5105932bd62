"""Exception types for callers that prefer raising over result inspection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from packages.syslog_shared.errors import ErrorDetail, codes

from .result import ValidationResult


@dataclass(frozen=True)
class FieldValidationError(Exception):
    """Base error for a field value rejected by validation."""

    detail: ErrorDetail

    def __str__(self) -> str:
        """Return the localized error message."""
        return self.detail.message

    @property
    def code(self) -> str:
        """Return the machine-readable error code."""
        return self.detail.code

    @property
    def metadata(self) -> Mapping[str, str]:
        """Return the structured diagnostic payload."""
        return self.detail.metadata


@dataclass(frozen=True)
class LengthExceededError(FieldValidationError):
    """The value is longer than its field kind allows."""


@dataclass(frozen=True)
class InvalidEncodingError(FieldValidationError):
    """The value contains a byte outside its field kind's character set."""


_CODE_TO_ERROR: Mapping[str, type[FieldValidationError]] = {
    codes.ARGUMENT_TOO_BIG: LengthExceededError,
    codes.INVALID_ENCODING: InvalidEncodingError,
}


def raise_for_result(result: ValidationResult) -> int:
    """Return the validated length or raise the typed error for a failure."""
    if result.error is None:
        return result.length
    error_type = _CODE_TO_ERROR.get(result.error.code, FieldValidationError)
    raise error_type(detail=result.error)
