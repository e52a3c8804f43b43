from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from places_api.config import Settings, get_settings
from places_api.main import create_app
from places_api.observability.metrics import reset_metrics


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEED_SAMPLE_DATA", "true")
    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "true")
    get_settings.cache_clear()
    reset_metrics()

    yield

    reset_metrics()
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    # A fresh app per test, so every test gets its own stores.
    return create_app(settings)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
