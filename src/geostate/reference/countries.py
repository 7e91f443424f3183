"""Country repository backed by pycountry (ISO 3166-1)."""

from __future__ import annotations

import pycountry

from geostate.core.exceptions import UnknownCountryError
from geostate.core.models import Country
from geostate.reference.base import CountryRepository


class PycountryCountryRepository(CountryRepository):
    """ISO 3166-1 countries with English common names where available."""

    def get(self, country_code: str) -> Country:
        record = pycountry.countries.get(alpha_2=country_code) if country_code else None
        if record is None:
            raise UnknownCountryError(country_code)
        return self._to_country(record)

    def list(self) -> list[Country]:
        countries = [self._to_country(record) for record in pycountry.countries]
        return sorted(countries, key=lambda c: c.code)

    @staticmethod
    def _to_country(record) -> Country:
        # "Bolivia" rather than "Bolivia, Plurinational State of"
        name = getattr(record, "common_name", None) or record.name
        return Country(code=record.alpha_2, name=name)
