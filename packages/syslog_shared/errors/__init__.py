"""Public shared error API for syslog-fields."""

from . import codes
from .factories import validation_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "codes",
    "validation_error",
]
