"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from geostate.api.schemas.base import APIBaseSchema


class AddressQueryResponse(APIBaseSchema):
    """Echo of the resolved address."""

    zip: str
    city: str
    country: str


class StateResponse(APIBaseSchema):
    """Subdivision resolution result."""

    query: AddressQueryResponse
    state: str | None = None
    found: bool
    duration_ms: float = 0.0


class StateValidationResponse(APIBaseSchema):
    """Subdivision validation result."""

    country: str
    state: str
    valid: bool


class RequiredStateCountriesResponse(APIBaseSchema):
    """Countries whose addresses require an administrative area."""

    countries: list[str] = Field(default_factory=list)
    count: int = 0


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
