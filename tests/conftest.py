from __future__ import annotations

import pytest
import respx

from colourlovers_tools.config.settings import get_settings

BASE_URL = "http://www.colourlovers.com/api/"
HOST = "www.colourlovers.com"


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "COLOURLOVERS_API_BASE_URL",
        "DEFAULT_API_TIMEOUT_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolate_global_respx_router():
    # Routes registered on the global router outside a global mock scope
    # would otherwise leak into later tests.
    respx.mock.snapshot()
    yield
    respx.mock.rollback()
