from __future__ import annotations

import pytest

from paging.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PAGING_DEFAULT_PAGE_SIZE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
