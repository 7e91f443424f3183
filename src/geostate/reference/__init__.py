"""Read-only reference data: countries, subdivisions and address formats."""

from geostate.reference.address_formats import I18nAddressFormatRepository
from geostate.reference.base import (
    AddressFormatRepository,
    CountryRepository,
    SubdivisionRepository,
)
from geostate.reference.countries import PycountryCountryRepository
from geostate.reference.subdivisions import PycountrySubdivisionRepository

__all__ = [
    # Base
    "AddressFormatRepository",
    "CountryRepository",
    "SubdivisionRepository",
    # Implementations
    "I18nAddressFormatRepository",
    "PycountryCountryRepository",
    "PycountrySubdivisionRepository",
]
