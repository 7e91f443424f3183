"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import pytest
import respx

from geostate.core.models import Subdivision
from geostate.reference.base import SubdivisionRepository


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Fake Sleep
# ============================================================================


class RecordingSleep:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep() -> RecordingSleep:
    return RecordingSleep()


# ============================================================================
# In-Memory Reference Data
# ============================================================================


class StaticSubdivisionRepository(SubdivisionRepository):
    """Subdivision repository over a fixed mapping."""

    def __init__(self, data: dict[str, list[Subdivision]]) -> None:
        self._data = data

    def get_all(self, country_code: str) -> list[Subdivision]:
        return sorted(self._data.get(country_code.upper(), []), key=lambda s: s.code)


@pytest.fixture
def static_subdivisions() -> StaticSubdivisionRepository:
    """A tiny dataset: three Spanish subdivisions and a country without any."""
    return StaticSubdivisionRepository(
        {
            "ES": [
                Subdivision(code="ES-M", name="Madrid", type="Province", parent_code="ES-MD"),
                Subdivision(code="ES-MD", name="Madrid, Comunidad de", type="Autonomous community"),
                Subdivision(code="ES-PM", name="Illes Balears; Islas Baleares", type="Autonomous community"),
            ],
            "XK": [],
        }
    )
