"""API schema definitions."""

from geostate.api.schemas.base import APIBaseSchema
from geostate.api.schemas.responses import (
    AddressQueryResponse,
    HealthResponse,
    RequiredStateCountriesResponse,
    StateResponse,
    StateValidationResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Responses
    "AddressQueryResponse",
    "HealthResponse",
    "RequiredStateCountriesResponse",
    "StateResponse",
    "StateValidationResponse",
]
