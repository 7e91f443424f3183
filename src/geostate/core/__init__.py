"""Core types, models, and exceptions."""

from .exceptions import (
    GeocodeError,
    GeocodeUnavailableError,
    GeostateError,
    ReferenceDataError,
    UnknownCountryError,
)
from .models import (
    Address,
    AddressComponent,
    AddressFormat,
    AddressQuery,
    CandidatePair,
    Country,
    GeocodeResponse,
    GeocodeResult,
    MatchResult,
    Subdivision,
    Violation,
)
from .types import (
    AddressField,
    AttemptOutcome,
    ComponentType,
    MatchStrategy,
    SubdivisionCode,
    ViolationCode,
)

__all__ = [
    # Types
    "AddressField",
    "AttemptOutcome",
    "ComponentType",
    "MatchStrategy",
    "SubdivisionCode",
    "ViolationCode",
    # Models
    "Address",
    "AddressComponent",
    "AddressFormat",
    "AddressQuery",
    "CandidatePair",
    "Country",
    "GeocodeResponse",
    "GeocodeResult",
    "MatchResult",
    "Subdivision",
    "Violation",
    # Exceptions
    "GeocodeError",
    "GeocodeUnavailableError",
    "GeostateError",
    "ReferenceDataError",
    "UnknownCountryError",
]
