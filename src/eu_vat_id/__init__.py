"""Offline syntax validation of EU VAT identification numbers."""

from importlib.metadata import PackageNotFoundError, version

from .config import Settings, configure_logging, get_settings
from .exceptions import InvalidBaseStructure, InvalidLocalVatId, InvalidState, VatIdError
from .models import VatId
from .services.parser import parse, split
from .services.registry import STATES, supported_states
from .services.validators import check, check_by_state

__all__ = [
    "InvalidBaseStructure",
    "InvalidLocalVatId",
    "InvalidState",
    "STATES",
    "Settings",
    "VatId",
    "VatIdError",
    "check",
    "check_by_state",
    "configure_logging",
    "get_settings",
    "get_version",
    "parse",
    "split",
    "supported_states",
]


def get_version() -> str:
    """Return the installed package version."""
    try:
        return version("eu-vat-id")
    except PackageNotFoundError:  # running from a source checkout
        return "0+unknown"
