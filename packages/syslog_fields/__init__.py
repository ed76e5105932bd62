"""Validation of RFC 5424 header and structured-data name fields.

Each field kind has a maximum byte length and a character-set policy; a value
that passes its validator satisfies both.
"""

from .charset import (
    IDENTIFIER_ROLE,
    PRINTABLE_ASCII_ROLE,
    first_invalid_name,
    first_invalid_printable,
    validate_name_chars,
    validate_printable_ascii,
)
from .exceptions import (
    FieldValidationError,
    InvalidEncodingError,
    LengthExceededError,
    raise_for_result,
)
from .kinds import FIELD_POLICIES, CharsetPolicy, FieldKind, policy_for
from .l10n import render_error, render_message, supported_locales
from .length import byte_length, check_length
from .result import ValidationResult
from .startup import configure_from_settings
from .validators import (
    DEFAULT_LIMITS,
    FieldValidator,
    build_validator,
    require,
    validate,
    validate_app_name,
    validate_app_name_length,
    validate_element_name,
    validate_element_name_length,
    validate_hostname,
    validate_hostname_length,
    validate_length,
    validate_msgid,
    validate_msgid_length,
    validate_param_name,
    validate_param_name_length,
    validate_procid,
    validate_procid_length,
)

__all__ = [
    "CharsetPolicy",
    "DEFAULT_LIMITS",
    "FIELD_POLICIES",
    "FieldKind",
    "FieldValidationError",
    "FieldValidator",
    "IDENTIFIER_ROLE",
    "InvalidEncodingError",
    "LengthExceededError",
    "PRINTABLE_ASCII_ROLE",
    "ValidationResult",
    "build_validator",
    "byte_length",
    "check_length",
    "configure_from_settings",
    "first_invalid_name",
    "first_invalid_printable",
    "policy_for",
    "raise_for_result",
    "render_error",
    "render_message",
    "require",
    "supported_locales",
    "validate",
    "validate_app_name",
    "validate_app_name_length",
    "validate_element_name",
    "validate_element_name_length",
    "validate_hostname",
    "validate_hostname_length",
    "validate_length",
    "validate_msgid",
    "validate_msgid_length",
    "validate_name_chars",
    "validate_param_name",
    "validate_param_name_length",
    "validate_printable_ascii",
    "validate_procid",
    "validate_procid_length",
]
