"""Shared error code constants.

These constants are stable machine-readable identifiers for validation
failures. Renderers and callers should branch on codes, never on messages,
since messages are localized.
"""

# Generic validation
VALIDATION_ERROR = "VALIDATION_ERROR"

# Field validation
ARGUMENT_TOO_BIG = "ARGUMENT_TOO_BIG"
INVALID_ENCODING = "INVALID_ENCODING"
