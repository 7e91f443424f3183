"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import respx
from fastapi.testclient import TestClient

from geostate.api.app import create_app
from geostate.client import StateResolver
from geostate.config import GeostateSettings
from geostate.geocoding.client import GeocodeClient, GeocodeConfig


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def geocode_mock() -> Iterator[respx.MockRouter]:
    """Mock the geocoding service.

    TestClient talks to the app through its own transport, so only the
    resolver's outbound requests reach the router.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def resolver(geocode_config: GeocodeConfig, settings: GeostateSettings) -> StateResolver:
    """Resolver whose geocoder never sleeps."""
    geocoder = GeocodeClient(geocode_config, sleep=lambda _: None)
    return StateResolver(settings, geocoder=geocoder)


@pytest.fixture
def test_client(settings: GeostateSettings, resolver: StateResolver) -> Iterator[TestClient]:
    """Test client running the app lifespan around each test."""
    app = create_app(settings=settings, resolver=resolver)
    with TestClient(app) as client:
        yield client
