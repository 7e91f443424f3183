"""Subdivision repository backed by pycountry (ISO 3166-2)."""

from __future__ import annotations

import pycountry

from geostate.core.exceptions import UnknownCountryError
from geostate.core.models import Subdivision
from geostate.reference.base import SubdivisionRepository


class PycountrySubdivisionRepository(SubdivisionRepository):
    """ISO 3166-2 subdivisions, memoized per country."""

    def __init__(self) -> None:
        self._by_country: dict[str, list[Subdivision]] = {}

    def get_all(self, country_code: str) -> list[Subdivision]:
        key = country_code.upper()
        if key not in self._by_country:
            if not country_code or pycountry.countries.get(alpha_2=country_code) is None:
                raise UnknownCountryError(country_code)
            records = pycountry.subdivisions.get(country_code=key) or []
            self._by_country[key] = sorted(
                (
                    Subdivision(
                        code=record.code,
                        name=record.name,
                        type=getattr(record, "type", None),
                        parent_code=record.parent_code,
                    )
                    for record in records
                ),
                key=lambda s: s.code,
            )
        return self._by_country[key]
