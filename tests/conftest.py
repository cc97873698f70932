from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.api import deps
from app.clients.openweather import OpenWeatherClient
from app.core.config import Settings
from app.factory import create_app
from tests.fakes import FakeClock, FakeRecentLocationStore, ProviderStub


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        log_level="DEBUG",
        cors_origins=["http://localhost"],
        openweather_api_key="test-api-key",
        mongo_uri="",
        recent_locations_limit=5,
    )


@pytest.fixture()
def provider() -> ProviderStub:
    return ProviderStub()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> FakeRecentLocationStore:
    return FakeRecentLocationStore(clock=clock)


def _build_client(settings: Settings, provider: ProviderStub, store=None) -> TestClient:
    app = create_app(settings)
    weather_client = OpenWeatherClient(
        api_key=settings.openweather_api_key, transport=provider.transport
    )
    app.dependency_overrides[deps.get_weather_client] = lambda: weather_client
    if store is not None:
        app.dependency_overrides[deps.get_recent_location_store] = lambda: store
    return TestClient(app)


@pytest.fixture()
def client(settings: Settings, provider: ProviderStub, store: FakeRecentLocationStore) -> TestClient:
    with _build_client(settings, provider, store) as client:
        yield client


@pytest.fixture()
def client_without_store(settings: Settings, provider: ProviderStub) -> TestClient:
    """App as configured with no MONGO_URI: the lifespan installs the null store."""
    with _build_client(settings, provider) as client:
        yield client


@pytest.fixture()
def client_without_credential(
    settings: Settings, provider: ProviderStub, store: FakeRecentLocationStore
) -> TestClient:
    settings = settings.model_copy(update={"openweather_api_key": ""})
    with _build_client(settings, provider, store) as client:
        yield client
