"""
Shared fixtures.
"""

import pytest

from barcodecheck.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Rebuild settings for every test so env overrides do not leak."""
    for name in ("SEPARATORS", "STRIP_WHITESPACE", "ISBN10_ACCEPT_X", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"BARCODECHECK_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
