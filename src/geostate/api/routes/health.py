"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from geostate import __version__
from geostate.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its dependencies.",
)
def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        services["resolver"] = "down"
        overall_status = "unhealthy"
    else:
        services["resolver"] = "up"

    # The geocoding service is external and not probed per health check
    services["geocoder"] = "unknown"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )
