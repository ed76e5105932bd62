"""Canonical shared error types for syslog-fields.

This module defines the transport-agnostic error shape returned inside
validation results in place of a process-wide "last error" slot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """High-level error categories."""

    VALIDATION = "validation"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object carried by validation results."""

    code: str
    message: str
    category: ErrorCategory
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)
