"""Geocoding query construction."""

from __future__ import annotations

from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict

from geostate.reference.base import CountryRepository

ADDRESS_SEPARATOR = ","


class GeocodeQuery(BaseModel):
    """Free-text address sent to the geocoding service."""

    model_config = ConfigDict(frozen=True)

    address: str

    @property
    def encoded(self) -> str:
        """URL-encoded address, form-style (spaces as "+")."""
        return quote_plus(self.address)

    def to_params(self, api_key: str | None = None) -> dict[str, str]:
        """Query parameters for the geocoding request."""
        params = {"address": self.address}
        if api_key:
            params["key"] = api_key
        return params


def build_query(
    zip: str,
    city: str,
    country: str,
    countries: CountryRepository,
) -> GeocodeQuery:
    """
    Build the geocoding query for an address.

    The country code is replaced by its English display name and the parts
    are joined with commas: ``"73505,Lawton,United States"``.

    Raises:
        UnknownCountryError: If the country code is not in the dataset
    """
    country_name = countries.get_name(country)
    return GeocodeQuery(address=ADDRESS_SEPARATOR.join([zip, city, country_name]))
