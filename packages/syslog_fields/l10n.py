"""Localized message catalogs for field validation errors.

Error details carry a ``message_key`` plus the structured parameters the
template needs, so a message can be re-rendered in any supported locale from
the error alone.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from packages.syslog_shared.config import DEFAULT_LOCALE
from packages.syslog_shared.errors import ErrorDetail

STRING_TOO_LONG = "string_too_long"
FORMAT_ERROR = "format_error"
STRING_LENGTH_CODE_TYPE = "string_length_code_type"

_CATALOGS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "en-US": {
            STRING_TOO_LONG: (
                "the provided string is too long ({length} bytes, "
                "the maximum is {max_length})"
            ),
            FORMAT_ERROR: "the provided string is not valid {role}",
            STRING_LENGTH_CODE_TYPE: "the length of the string",
        },
        "de-DE": {
            STRING_TOO_LONG: (
                "die angegebene Zeichenkette ist zu lang ({length} Bytes, "
                "erlaubt sind höchstens {max_length})"
            ),
            FORMAT_ERROR: "die angegebene Zeichenkette ist als {role} ungültig",
            STRING_LENGTH_CODE_TYPE: "die Länge der Zeichenkette",
        },
        "es-ES": {
            STRING_TOO_LONG: (
                "la cadena proporcionada es demasiado larga ({length} bytes, "
                "el máximo es {max_length})"
            ),
            FORMAT_ERROR: "la cadena proporcionada no es un {role} válido",
            STRING_LENGTH_CODE_TYPE: "la longitud de la cadena",
        },
        "fr-FR": {
            STRING_TOO_LONG: (
                "la chaîne fournie est trop longue ({length} octets, "
                "le maximum est {max_length})"
            ),
            FORMAT_ERROR: "la chaîne fournie n'est pas un {role} valide",
            STRING_LENGTH_CODE_TYPE: "la longueur de la chaîne",
        },
    }
)

# Role names are carried untranslated in error metadata.
_ROLE_NAMES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "en-US": {"printable ascii": "printable ascii", "identifier": "identifier"},
        "de-DE": {"printable ascii": "druckbares ASCII", "identifier": "Bezeichner"},
        "es-ES": {"printable ascii": "ASCII imprimible", "identifier": "identificador"},
        "fr-FR": {"printable ascii": "ASCII imprimable", "identifier": "identifiant"},
    }
)


def supported_locales() -> tuple[str, ...]:
    """Return the locale tags with a message catalog."""
    return tuple(sorted(_CATALOGS))


def resolve_locale(locale: str | None) -> str:
    """Map a requested locale onto a supported one.

    Exact tags win, then the first catalog sharing the language subtag, then
    the default locale.
    """
    if not locale:
        return DEFAULT_LOCALE
    candidate = locale.strip().replace("_", "-")
    for tag in _CATALOGS:
        if tag.lower() == candidate.lower():
            return tag
    language = candidate.partition("-")[0].lower()
    for tag in supported_locales():
        if tag.partition("-")[0].lower() == language:
            return tag
    return DEFAULT_LOCALE


def render_message(key: str, locale: str | None = None, **params: object) -> str:
    """Render one catalog template in the requested locale."""
    tag = resolve_locale(locale)
    template = _CATALOGS[tag].get(key)
    if template is None:
        raise KeyError(f"unknown message key: {key}")
    if "role" in params:
        role = str(params["role"])
        params["role"] = _ROLE_NAMES[tag].get(role, role)
    return template.format(**params)


def render_error(detail: ErrorDetail, locale: str | None = None) -> str:
    """Re-render an error detail's message in another locale.

    Details without a ``message_key`` keep their original message.
    """
    metadata = dict(detail.metadata)
    key = metadata.pop("message_key", None)
    if key is None:
        return detail.message
    return render_message(key, locale, **metadata)
