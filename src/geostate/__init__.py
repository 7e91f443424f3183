"""Geostate - Resolve postal addresses to ISO 3166-2 subdivision codes."""

from geostate.client import StateResolver, get_state
from geostate.config import GeostateSettings
from geostate.core.exceptions import GeostateError, UnknownCountryError
from geostate.core.models import AddressQuery, CandidatePair, MatchResult
from geostate.core.types import MatchStrategy, SubdivisionCode

__version__ = "0.1.0"
__all__ = [
    # Client
    "StateResolver",
    "get_state",
    # Config
    "GeostateSettings",
    # Types
    "MatchStrategy",
    "SubdivisionCode",
    # Models
    "AddressQuery",
    "CandidatePair",
    "MatchResult",
    # Exceptions
    "GeostateError",
    "UnknownCountryError",
    # Version
    "__version__",
]
