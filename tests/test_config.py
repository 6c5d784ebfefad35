from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError

import eu_vat_id
from eu_vat_id import Settings, configure_logging, get_settings, get_version


def test_defaults():
    settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.log_rejections is True


def test_settings_are_memoized():
    assert get_settings() is get_settings()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("EU_VAT_ID_LOG_LEVEL", "debug")
    monkeypatch.setenv("EU_VAT_ID_LOG_REJECTIONS", "0")
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_rejections is False


def test_unknown_log_level_falls_back_to_warning(monkeypatch):
    assert Settings(log_level="chatty").log_level == "WARNING"
    monkeypatch.setenv("EU_VAT_ID_LOG_LEVEL", "chatty")
    assert get_settings().log_level == "WARNING"


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("eu_vat_id")
    previous = logger.level
    try:
        configured = configure_logging(Settings(log_level="info"))
        assert configured is logger
        assert logger.level == logging.INFO
        assert not logger.handlers
    finally:
        logger.setLevel(previous)


def test_get_version_returns_string():
    assert isinstance(get_version(), str)


def test_get_version_without_package_metadata(monkeypatch):
    def missing(name):
        raise PackageNotFoundError(name)

    monkeypatch.setattr(eu_vat_id, "version", missing)
    assert get_version() == "0+unknown"
