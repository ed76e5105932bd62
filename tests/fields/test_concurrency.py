"""Tests for concurrent validation from independent threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from packages.syslog_fields import FieldKind, validate
from packages.syslog_shared.errors import codes


def _case(index: int) -> tuple[FieldKind, str, str | None]:
    """Return a deterministic (kind, value, expected code) triple."""
    if index % 3 == 0:
        return FieldKind.HOSTNAME, f"host-{index}.example.com", None
    if index % 3 == 1:
        return FieldKind.PARAM_NAME, f"param={index}", codes.INVALID_ENCODING
    return FieldKind.MSGID, "m" * (33 + index % 7), codes.ARGUMENT_TOO_BIG


def test_concurrent_results_are_attributable_to_their_call() -> None:
    """Each thread sees only the error produced by its own validation."""
    cases = [_case(index) for index in range(600)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda case: validate(case[0], case[1]), cases))

    for (kind, value, expected_code), result in zip(cases, results):
        assert result.length == len(value.encode("utf-8"))
        if expected_code is None:
            assert result.ok is True, (kind, value)
        else:
            assert result.error is not None
            assert result.error.code == expected_code
            assert result.error.metadata["field_kind"] == kind.value
