"""Tests for shared error factories and types."""

from __future__ import annotations

import pytest

from packages.syslog_shared.errors import ErrorCategory, ErrorDetail, codes, validation_error


def test_validation_error_defaults_to_generic_code() -> None:
    """validation_error should use the generic code and validation category."""
    error = validation_error("bad input")

    assert error.code == codes.VALIDATION_ERROR
    assert error.category == ErrorCategory.VALIDATION
    assert error.retryable is False
    assert error.metadata == {}


def test_validation_error_stringifies_metadata_and_drops_none() -> None:
    """Metadata values are normalized to strings and ``None`` values skipped."""
    error = validation_error(
        "too long",
        code=codes.ARGUMENT_TOO_BIG,
        metadata={"length": 256, "max_length": 255, "field_kind": None},
    )

    assert error.code == codes.ARGUMENT_TOO_BIG
    assert error.metadata == {"length": "256", "max_length": "255"}


def test_error_detail_is_immutable() -> None:
    """ErrorDetail instances must be frozen."""
    error = ErrorDetail(code="X", message="y", category=ErrorCategory.VALIDATION)

    with pytest.raises(AttributeError):
        error.code = "Z"  # type: ignore[misc]


def test_error_categories_are_validation_only() -> None:
    """Field validation produces a single error category."""
    assert [category.value for category in ErrorCategory] == ["validation"]
