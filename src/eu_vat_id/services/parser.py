"""Two-stage VAT ID parsing: split off the country code, then match the rest."""
from __future__ import annotations

import logging
import re
import string

from ..config import get_settings
from ..exceptions import InvalidBaseStructure, InvalidLocalVatId, VatIdError
from ..models import VatId
from .registry import get_pattern

logger = logging.getLogger(__name__)

# Remainder is left unconstrained; the country pattern decides what it may contain.
BASE_STRUCTURE = re.compile(r"([A-Z]{2})(.+)", re.ASCII | re.DOTALL)

# Only ASCII letters are case-folded; str.upper() maps "ı" to "I" and "ſ" to "S".
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def split(vat_id: str) -> tuple[str, str]:
    """Uppercase ASCII letters in ``vat_id`` and split off the country code."""
    if not isinstance(vat_id, str):
        raise TypeError(f"VAT ID must be a string, not {type(vat_id).__name__}")
    match = BASE_STRUCTURE.fullmatch(vat_id.translate(_ASCII_UPPER))
    if match is None:
        raise InvalidBaseStructure(vat_id)
    return match.group(1), match.group(2)


def parse(vat_id: str) -> VatId:
    """Parse ``vat_id`` into a :class:`VatId`.

    This is an offline syntax check; a successful parse does not mean the
    number was ever issued. Use :func:`eu_vat_id.check` when only a yes/no
    answer is needed.

    Raises, in this order of precedence:

    * :class:`InvalidBaseStructure` - not two letters followed by more input
    * :class:`InvalidState` - prefix is not an EU country code
    * :class:`InvalidLocalVatId` - local part does not fit the country's format
    """
    try:
        state_iso, local_vat_id = split(vat_id)
        pattern = get_pattern(state_iso, vat_id)
        if pattern.fullmatch(local_vat_id) is None:
            raise InvalidLocalVatId(vat_id, state_iso, local_vat_id)
    except VatIdError as exc:
        if get_settings().log_rejections:
            logger.debug("Rejected VAT ID %r: %s", vat_id, exc.code)
        raise

    logger.debug("Parsed VAT ID %r as %s/%s", vat_id, state_iso, local_vat_id)
    return VatId(state_iso=state_iso, local_vat_id=local_vat_id)
