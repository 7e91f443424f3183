"""Resolution service for orchestrating the query → geocode → match flow."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from geostate.core.models import AddressQuery, MatchResult
from geostate.geocoding.extractor import extract_candidates
from geostate.geocoding.query import build_query

if TYPE_CHECKING:
    from geostate.geocoding.client import GeocodeClient
    from geostate.reference.base import CountryRepository
    from geostate.resolution.matcher import SubdivisionMatcher

logger = logging.getLogger(__name__)


class StateResolutionService:
    """
    Service resolving one address to a subdivision code, without caching.

    Orchestrates the resolution flow:
    1. Build the geocoding query from zip, city and country name
    2. Geocode with pacing and bounded retries
    3. Extract level-1/level-2 candidates from the first result
    4. Match candidates against validated subdivision codes
    """

    def __init__(
        self,
        countries: CountryRepository,
        geocoder: GeocodeClient,
        matcher: SubdivisionMatcher,
    ) -> None:
        self._countries = countries
        self._geocoder = geocoder
        self._matcher = matcher

    def resolve(self, query: AddressQuery) -> MatchResult | None:
        """
        Resolve an address query.

        Returns:
            The validated match, or None when geocoding fails or no candidate
            validates

        Raises:
            UnknownCountryError: If the country code is not in the dataset
        """
        start = time.monotonic()

        geocode_query = build_query(query.zip, query.city, query.country, self._countries)
        response = self._geocoder.fetch(geocode_query)
        if response is None:
            logger.info(f"No geocoding result for {geocode_query.address}")
            return None

        candidates = extract_candidates(response.first_components)
        if candidates.is_empty:
            logger.info(f"No administrative area in geocoding result for {geocode_query.address}")
            return None

        result = self._matcher.match(query.country, candidates)

        duration = time.monotonic() - start
        if result:
            logger.info(f"Resolved {geocode_query.address} to {result.code} in {duration:.2f}s")
        else:
            logger.info(
                f"No valid subdivision for {geocode_query.address} in {duration:.2f}s "
                f"(candidates: {candidates.administrative_area_level_1!r}, "
                f"{candidates.administrative_area_level_2!r})"
            )
        return result
