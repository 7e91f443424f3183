"""Address-format repository backed by Google's address metadata (google-i18n-address).

Each country lists its required fields as a string of field letters
(``A`` address line, ``C`` locality, ``S`` administrative area, ``Z`` postal
code, ...). Countries without metadata use the ``ZZ`` defaults.
"""

from __future__ import annotations

import logging
from typing import Any

import i18naddress

from geostate.core.exceptions import ReferenceDataError
from geostate.core.models import AddressFormat
from geostate.core.types import AddressField
from geostate.reference.base import AddressFormatRepository

logger = logging.getLogger(__name__)

DEFAULT_KEY = "ZZ"

# i18naddress field names
ADDRESS_FIELDS: dict[str, AddressField] = {
    "country_area": AddressField.ADMINISTRATIVE_AREA,
    "city": AddressField.LOCALITY,
    "city_area": AddressField.DEPENDENT_LOCALITY,
    "postal_code": AddressField.POSTAL_CODE,
    "sorting_code": AddressField.SORTING_CODE,
    "street_address": AddressField.ADDRESS_LINE,
    "company_name": AddressField.ORGANIZATION,
    "name": AddressField.RECIPIENT,
}


def parse_required_fields(require: str) -> frozenset[AddressField]:
    """Translate a field-letter string such as "ACSZ" into address fields."""
    try:
        return frozenset(ADDRESS_FIELDS[i18naddress.FIELD_MAPPING[letter]] for letter in require)
    except KeyError as e:
        raise ReferenceDataError(
            f"Unknown address field letter {e.args[0]!r} in {require!r}",
            details={"require": require},
        ) from e


def _split(value: str | None) -> list[str]:
    return value.split("~") if value else []


class I18nAddressFormatRepository(AddressFormatRepository):
    """Address formats from the metadata shipped with google-i18n-address."""

    def __init__(self) -> None:
        self._formats: dict[str, AddressFormat] = {}

    def get(self, country_code: str) -> AddressFormat:
        key = country_code.upper()
        if key not in self._formats:
            rules = self._load_rules(key)
            self._formats[key] = AddressFormat(
                country_code=key,
                required_fields=parse_required_fields(rules.get("require", "")),
                administrative_area_keys={
                    isoid: area_key
                    for isoid, area_key in zip(_split(rules.get("sub_isoids")), _split(rules.get("sub_keys")))
                    if isoid
                },
            )
        return self._formats[key]

    @staticmethod
    def _load_rules(key: str) -> dict[str, Any]:
        rules = dict(i18naddress.load_validation_data(DEFAULT_KEY)[DEFAULT_KEY])
        if key == DEFAULT_KEY:
            return rules
        try:
            database = i18naddress.load_validation_data(key)
        except ValueError:
            logger.debug(f"No address metadata for {key!r}, using defaults")
            return rules
        rules.update(database.get(key, {}))
        return rules
