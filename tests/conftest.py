"""Shared test fixtures for all tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from geostate.config import GeostateSettings
from geostate.geocoding.client import GeocodeConfig
from geostate.reference.address_formats import I18nAddressFormatRepository
from geostate.reference.countries import PycountryCountryRepository
from geostate.reference.subdivisions import PycountrySubdivisionRepository
from geostate.validation.address import AddressFormatValidator
from geostate.validation.subdivision import SubdivisionValidator

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Geocoding endpoint used by every mocked test
GEOCODE_URL = "https://geocode.test/maps/api/geocode/json"


def load_geocode_fixture(name: str) -> dict[str, Any]:
    """Load a recorded geocoding response from tests/fixtures/geocode."""
    path = FIXTURES_DIR / "geocode" / f"{name}.json"
    with open(path, encoding="utf-8") as f:
        return json.load(f)


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def geocode_url() -> str:
    return GEOCODE_URL


@pytest.fixture
def settings() -> GeostateSettings:
    """Settings pointing at the mocked endpoint, without pacing."""
    return GeostateSettings(
        _env_file=None,
        geocode_url=GEOCODE_URL,
        geocode_api_key=None,
        pacing_delay=0.0,
    )


@pytest.fixture
def geocode_config() -> GeocodeConfig:
    """Geocoding client config pointing at the mocked endpoint, without pacing."""
    return GeocodeConfig(url=GEOCODE_URL, pacing_delay=0.0)


# ============================================================================
# Reference Data Fixtures
# ============================================================================


@pytest.fixture
def countries() -> PycountryCountryRepository:
    return PycountryCountryRepository()


@pytest.fixture
def subdivisions() -> PycountrySubdivisionRepository:
    return PycountrySubdivisionRepository()


@pytest.fixture
def address_formats() -> I18nAddressFormatRepository:
    return I18nAddressFormatRepository()


@pytest.fixture
def address_validator(
    address_formats: I18nAddressFormatRepository,
) -> AddressFormatValidator:
    return AddressFormatValidator(address_formats)


@pytest.fixture
def subdivision_validator(
    address_formats: I18nAddressFormatRepository,
    address_validator: AddressFormatValidator,
) -> SubdivisionValidator:
    return SubdivisionValidator(address_formats, address_validator)


# ============================================================================
# Geocoding Payload Fixtures
# ============================================================================


@pytest.fixture
def lawton_response() -> dict[str, Any]:
    """73505 Lawton, US: county at level 2, "OK" at level 1."""
    return load_geocode_fixture("lawton_us")


@pytest.fixture
def cantley_response() -> dict[str, Any]:
    """J8V 3E1 Cantley, CA: regional municipality at level 2, "QC" at level 1."""
    return load_geocode_fixture("cantley_ca")


@pytest.fixture
def boadilla_response() -> dict[str, Any]:
    """28660 Boadilla del Monte, ES: province "M" at level 2, "MD" at level 1."""
    return load_geocode_fixture("boadilla_es")


@pytest.fixture
def strathfield_response() -> dict[str, Any]:
    """2136 Strathfield South, AU: council at level 2, "NSW" at level 1."""
    return load_geocode_fixture("strathfield_au")


@pytest.fixture
def zero_results_response() -> dict[str, Any]:
    return load_geocode_fixture("zero_results")
