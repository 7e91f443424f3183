"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from geostate.cache.decorators import cached
from geostate.cache.keys import CacheKeys
from geostate.cache.memory import ResolutionCache
from geostate.config import GeostateSettings
from geostate.core.models import AddressQuery, MatchResult
from geostate.core.types import SubdivisionCode
from geostate.geocoding.client import GeocodeClient, GeocodeConfig
from geostate.reference.address_formats import I18nAddressFormatRepository
from geostate.reference.base import (
    AddressFormatRepository,
    CountryRepository,
    SubdivisionRepository,
)
from geostate.reference.countries import PycountryCountryRepository
from geostate.reference.subdivisions import PycountrySubdivisionRepository
from geostate.resolution.matcher import SubdivisionMatcher
from geostate.services.resolution import StateResolutionService
from geostate.validation.address import AddressFormatValidator
from geostate.validation.subdivision import SubdivisionValidator

logger = logging.getLogger(__name__)


class StateResolver:
    """
    Main client for the geostate library.

    Resolves (zip, city, country) to an ISO 3166-2 subdivision code such as
    "US-OK". Successful resolutions are memoized in a cache owned by this
    instance; failed ones are recomputed on every call.

    Usage:
        with StateResolver() as resolver:
            resolver.get_state("73505", "Lawton", "US")      # "US-OK"
            resolver.validate_state("ES", "ES-M")            # True
            resolver.get_countries_with_required_state()     # {"US", "CA", ...}

    Reference data repositories and the geocoding client can be injected;
    the resolver takes ownership of the geocoding client and closes it.
    """

    def __init__(
        self,
        settings: GeostateSettings | None = None,
        *,
        countries: CountryRepository | None = None,
        subdivisions: SubdivisionRepository | None = None,
        address_formats: AddressFormatRepository | None = None,
        geocoder: GeocodeClient | None = None,
        use_cache: bool = True,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            countries: Country name lookup (defaults to pycountry)
            subdivisions: Subdivision lookup (defaults to pycountry)
            address_formats: Address-format metadata (defaults to google-i18n-address)
            geocoder: Geocoding client (defaults to one built from settings)
            use_cache: Whether to memoize successful resolutions
        """
        self._settings = settings or GeostateSettings()
        self._countries = countries or PycountryCountryRepository()
        self._subdivisions = subdivisions or PycountrySubdivisionRepository()
        self._address_formats = address_formats or I18nAddressFormatRepository()
        self._geocoder = geocoder or GeocodeClient(GeocodeConfig.from_settings(self._settings))

        self._validator = SubdivisionValidator(
            self._address_formats,
            AddressFormatValidator(self._address_formats),
        )
        self._service = StateResolutionService(
            self._countries,
            self._geocoder,
            SubdivisionMatcher(self._subdivisions, self._validator),
        )
        self._cache: ResolutionCache | None = ResolutionCache() if use_cache else None

    def __enter__(self) -> StateResolver:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP client and drop cached resolutions."""
        self._geocoder.close()
        if self._cache is not None:
            self._cache.clear()

    @property
    def cache(self) -> ResolutionCache | None:
        return self._cache

    @cached(CacheKeys.resolution)
    def get_state(self, zip: str, city: str, country: str) -> SubdivisionCode | None:
        """
        Get the subdivision code for an address.

        Args:
            zip: ZIP or postal code
            city: City name
            country: ISO 3166-1 alpha-2 country code

        Returns:
            Code such as "US-OK", or None when it cannot be determined

        Raises:
            UnknownCountryError: If the country code is not in the dataset
        """
        result = self.resolve(zip, city, country)
        return result.code if result else None

    def resolve(self, zip: str, city: str, country: str) -> MatchResult | None:
        """Resolve without the cache, returning the matching strategy as well."""
        return self._service.resolve(AddressQuery(zip=zip, city=city, country=country))

    def validate_state(self, country: str, state: str) -> bool:
        """Check whether a subdivision code is acceptable for a country."""
        return self._validator.validate(country, state)

    def get_countries_with_required_state(self) -> set[str]:
        """Codes of every country whose addresses require an administrative area."""
        return {
            country.code
            for country in self._countries.list()
            if self._address_formats.get(country.code).requires_administrative_area
        }


# Convenience function for one-off resolutions
def get_state(
    zip: str,
    city: str,
    country: str,
    *,
    settings: GeostateSettings | None = None,
) -> SubdivisionCode | None:
    """
    Resolve a subdivision code (convenience function).

    For multiple resolutions, use StateResolver to benefit from its cache.
    """
    with StateResolver(settings) as resolver:
        return resolver.get_state(zip, city, country)
