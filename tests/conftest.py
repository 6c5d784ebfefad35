from __future__ import annotations

import pytest

from eu_vat_id.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("EU_VAT_ID_LOG_LEVEL", "EU_VAT_ID_LOG_REJECTIONS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
