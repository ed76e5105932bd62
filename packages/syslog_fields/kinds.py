"""Field kinds and the character-set policy each one must satisfy."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class FieldKind(str, Enum):
    """Closed set of header and structured-data fields that are validated.

    Values match the attribute names of ``FieldLimits`` so each kind resolves
    to exactly one configured maximum length.
    """

    APP_NAME = "app_name"
    HOSTNAME = "hostname"
    MSGID = "msgid"
    PROCID = "procid"
    ELEMENT_NAME = "element_name"
    PARAM_NAME = "param_name"


class CharsetPolicy(str, Enum):
    """Character-set restriction applied after the length check."""

    PRINTABLE_ASCII = "printable_ascii"
    RESTRICTED_NAME = "restricted_name"


FIELD_POLICIES: Mapping[FieldKind, CharsetPolicy] = MappingProxyType(
    {
        FieldKind.APP_NAME: CharsetPolicy.PRINTABLE_ASCII,
        FieldKind.HOSTNAME: CharsetPolicy.PRINTABLE_ASCII,
        FieldKind.MSGID: CharsetPolicy.PRINTABLE_ASCII,
        FieldKind.PROCID: CharsetPolicy.PRINTABLE_ASCII,
        # Structured-data names sit inside SD syntax and must avoid its delimiters.
        FieldKind.ELEMENT_NAME: CharsetPolicy.RESTRICTED_NAME,
        FieldKind.PARAM_NAME: CharsetPolicy.RESTRICTED_NAME,
    }
)


def policy_for(kind: FieldKind | str) -> CharsetPolicy:
    """Return the charset policy for one field kind.

    Raises ``ValueError`` for names outside the closed ``FieldKind`` set.
    """
    return FIELD_POLICIES[FieldKind(kind)]
