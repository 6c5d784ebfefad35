"""Library configuration for diagnostics."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Diagnostic knobs; they never change which VAT IDs are accepted."""

    model_config = SettingsConfigDict(
        env_prefix="EU_VAT_ID_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        "WARNING",
        description="Level applied to the eu_vat_id logger by configure_logging().",
    )
    log_rejections: bool = Field(
        True,
        description="Emit a DEBUG record with the error code for every rejected VAT ID.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            return "WARNING"
        return level


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""

    settings = settings or get_settings()
    logger = logging.getLogger("eu_vat_id")
    logger.setLevel(settings.log_level)
    return logger
