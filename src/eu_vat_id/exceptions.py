"""Error taxonomy raised by the VAT ID parser."""
from __future__ import annotations


class VatIdError(ValueError):
    """Base class for syntactically invalid VAT IDs.

    ``str(error)`` is the stable machine code, so callers can log or map it
    without matching on the class.
    """

    code = "invalid-vat-id"

    def __init__(self, value: str) -> None:
        super().__init__(self.code)
        self.value = value


class InvalidBaseStructure(VatIdError):
    """Input is not two letters followed by at least one more character."""

    code = "invalid-base-structure"


class InvalidState(VatIdError):
    """Two-letter prefix is not a known EU country code."""

    code = "invalid-state"

    def __init__(self, value: str, state_iso: str) -> None:
        super().__init__(value)
        self.state_iso = state_iso


class InvalidLocalVatId(VatIdError):
    """Country is known but the local part does not match its format."""

    code = "invalid-local_vat_id"

    def __init__(self, value: str, state_iso: str, local_vat_id: str) -> None:
        super().__init__(value)
        self.state_iso = state_iso
        self.local_vat_id = local_vat_id
