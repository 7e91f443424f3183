"""Country metadata endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from geostate.api.dependencies import Resolver
from geostate.api.schemas import RequiredStateCountriesResponse

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get(
    "/required-state",
    response_model=RequiredStateCountriesResponse,
    operation_id="getCountriesWithRequiredState",
    summary="Countries requiring a subdivision",
    description="List countries whose address format requires an administrative area.",
)
def countries_with_required_state(resolver: Resolver) -> RequiredStateCountriesResponse:
    """List country codes, sorted, whose addresses require a subdivision."""
    countries = sorted(resolver.get_countries_with_required_state())
    return RequiredStateCountriesResponse(countries=countries, count=len(countries))
