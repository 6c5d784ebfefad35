"""Boolean convenience checks over the VAT ID parser."""
from __future__ import annotations

from ..exceptions import VatIdError
from .parser import parse


def check(vat_id: str) -> bool:
    """Return True if ``vat_id`` has valid EU VAT ID syntax.

    It's an offline check, so it doesn't guarantee the VAT ID exists. Use
    :func:`eu_vat_id.parse` to find out why an ID was rejected.
    """
    try:
        parse(vat_id)
    except VatIdError:
        return False
    return True


def check_by_state(local_vat_id: str, state_iso: str) -> bool:
    """Return True if ``state_iso + local_vat_id`` has valid EU VAT ID syntax.

    The country code is not checked on its own; the base structure match
    done by :func:`check` covers it.
    """
    return check(state_iso + local_vat_id)
