"""Per-country local formats of EU VAT identification numbers."""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from ..exceptions import InvalidState

# Local part only, country prefix already stripped. Shape checks, no check digits.
_LOCAL_FORMATS: dict[str, str] = {
    "AT": r"U\d{8}",
    "BE": r"0\d{9}",
    "BG": r"\d{9,10}",
    "CY": r"\d{8}[A-Z]",
    "CZ": r"\d{8,10}",
    "DE": r"\d{9}",
    "DK": r"(?:\d{2} ?){4}",
    "EE": r"\d{9}",
    "EL": r"\d{9}",
    "ES": r"[0-9A-Z]\d{7}[0-9A-Z]",
    "FI": r"\d{8}",
    "FR": r"[0-9A-Z]{2} ?\d{9}",
    "GB": r"\d{3} ?\d{4} ?\d{2}|\d{3} ?\d{4} ?\d{2} ?\d{3}|GD\d{3}|HA\d{3}",
    "HR": r"\d{11}",
    "HU": r"\d{8}",
    "IE": r"\d[0-9A-Z+*]\d{5}[A-Z]{1,2}",
    "IT": r"\d{11}",
    "LT": r"\d{9}|\d{12}",
    "LU": r"\d{8}",
    "LV": r"\d{11}",
    "MT": r"\d{8}",
    "NL": r"\d{9}B\d{2}",
    "PL": r"\d{10}",
    "PT": r"\d{9}",
    "RO": r"\d{2,10}",
    "SE": r"\d{12}",
    "SI": r"\d{8}",
    "SK": r"\d{10}",
}

STATE_PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType(
    {state: re.compile(rf"(?:{fmt})", re.ASCII) for state, fmt in _LOCAL_FORMATS.items()}
)

STATES: frozenset[str] = frozenset(STATE_PATTERNS)


def get_pattern(state_iso: str, value: str | None = None) -> re.Pattern[str]:
    """Return the local-part pattern for ``state_iso``.

    Patterns are meant for ``fullmatch``; alternatives are grouped so every
    branch is anchored on both ends. Raises :class:`InvalidState` for codes
    outside the registry; ``value`` is the full input reported on the error.
    """
    try:
        return STATE_PATTERNS[state_iso]
    except KeyError:
        raise InvalidState(value if value is not None else state_iso, state_iso) from None


def supported_states() -> list[str]:
    """Return the known country codes in alphabetical order."""
    return sorted(STATES)
