"""Canonical logging field names.

Keeping names centralized keeps log records from validators, callers and
formatters on one stable key set.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"
EXCEPTION = "exception"

# Field validation.
FIELD_KIND = "field_kind"
ERROR_CODE = "error_code"
LENGTH = "length"
MAX_LENGTH = "max_length"
ROLE = "role"
POSITION = "position"
FIELD_REJECTED_EVENT = "field_rejected"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
