from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from honey_rae.config import get_settings
from honey_rae.db.store import ServiceStore, get_store, reset_store
from honey_rae.main import app
from honey_rae.observability.metrics import reset_metrics
from honey_rae.services.clock import set_today_provider

FIXED_TODAY = date(2025, 2, 15)


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEED_DEMO_DATA", "true")
    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "true")
    get_settings.cache_clear()

    reset_store(seed=True)
    reset_metrics()
    set_today_provider(lambda: FIXED_TODAY)

    yield

    set_today_provider(None)
    reset_store()
    get_settings.cache_clear()


@pytest.fixture
def store() -> ServiceStore:
    return get_store()


@pytest.fixture
def set_today():
    def _set(day: date) -> None:
        set_today_provider(lambda: day)

    return _set


@pytest.fixture
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
