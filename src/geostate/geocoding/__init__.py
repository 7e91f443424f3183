"""Geocoding layer: query building, HTTP client and candidate extraction."""

from geostate.geocoding.client import GeocodeClient, GeocodeConfig
from geostate.geocoding.extractor import extract_candidates
from geostate.geocoding.query import GeocodeQuery, build_query
from geostate.geocoding.retry import RetryPolicy, RetryResult

__all__ = [
    # Client
    "GeocodeClient",
    "GeocodeConfig",
    # Query
    "GeocodeQuery",
    "build_query",
    # Extraction
    "extract_candidates",
    # Retry
    "RetryPolicy",
    "RetryResult",
]
