"""Factory helpers for creating consistent shared errors."""

from __future__ import annotations

from typing import Mapping

from . import codes
from .types import ErrorCategory, ErrorDetail


def validation_error(
    message: str,
    *,
    code: str = codes.VALIDATION_ERROR,
    metadata: Mapping[str, object] | None = None,
) -> ErrorDetail:
    """Create a validation-category error.

    Validation failures are never retryable: the input has not changed
    between attempts.
    """
    return ErrorDetail(
        code=code,
        message=message,
        category=ErrorCategory.VALIDATION,
        retryable=False,
        metadata=_meta(metadata),
    )


def _meta(metadata: Mapping[str, object] | None) -> dict[str, str]:
    """Normalize optional metadata into a plain dict of strings."""
    if metadata is None:
        return {}
    return {str(key): str(value) for key, value in metadata.items() if value is not None}
