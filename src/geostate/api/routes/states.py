"""Subdivision resolution and validation endpoints."""

from __future__ import annotations

import time
from typing import Annotated

from fastapi import APIRouter, Query

from geostate.api.dependencies import Resolver
from geostate.api.schemas import (
    AddressQueryResponse,
    StateResponse,
    StateValidationResponse,
)

router = APIRouter(prefix="/states", tags=["states"])

CountryCode = Annotated[
    str,
    Query(min_length=2, max_length=2, description="ISO 3166-1 alpha-2 country code"),
]


@router.get(
    "/resolve",
    response_model=StateResponse,
    operation_id="resolveState",
    summary="Resolve subdivision code",
    description="Resolve a ZIP code, city and country to an ISO 3166-2 subdivision code.",
)
def resolve_state(
    resolver: Resolver,
    zip: Annotated[str, Query(min_length=1, description="ZIP or postal code")],
    city: Annotated[str, Query(min_length=1, description="City name")],
    country: CountryCode,
) -> StateResponse:
    """Resolve a subdivision code, served from the resolver cache when possible."""
    start_time = time.monotonic()

    state = resolver.get_state(zip, city, country)

    return StateResponse(
        query=AddressQueryResponse(zip=zip, city=city, country=country),
        state=state,
        found=state is not None,
        duration_ms=(time.monotonic() - start_time) * 1000,
    )


@router.get(
    "/validate",
    response_model=StateValidationResponse,
    operation_id="validateState",
    summary="Validate subdivision code",
    description="Check whether a subdivision code is acceptable for a country's addresses.",
)
def validate_state(
    resolver: Resolver,
    country: CountryCode,
    state: Annotated[str, Query(min_length=1, description="Subdivision code, e.g. US-OK")],
) -> StateValidationResponse:
    """Validate a subdivision code for a country."""
    return StateValidationResponse(
        country=country,
        state=state,
        valid=resolver.validate_state(country, state),
    )
