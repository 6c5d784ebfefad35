"""Value objects returned by the parser."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VatId:
    state_iso: str
    local_vat_id: str
