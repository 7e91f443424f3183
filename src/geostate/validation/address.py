"""Address-format ruleset: required fields, subdivision and postal code checks."""

from __future__ import annotations

import logging

import i18naddress

from geostate.core.models import Address, Violation
from geostate.core.types import ViolationCode
from geostate.reference.address_formats import ADDRESS_FIELDS
from geostate.reference.base import AddressFormatRepository

logger = logging.getLogger(__name__)


class AddressFormatValidator:
    """
    Validates an address against its country's address format.

    Normalization is delegated to ``i18naddress.normalize_address``, which
    reports per-field errors:
    - Every required field must be non-blank.
    - A non-blank administrative area must be one of the country's
      subdivisions (when the metadata lists any).
    - A non-blank postal code must match the country's postal pattern.
    """

    def __init__(self, address_formats: AddressFormatRepository) -> None:
        self._address_formats = address_formats

    def validate(self, address: Address) -> list[Violation]:
        """Return all violations for the address, empty when it is valid."""
        address_format = self._address_formats.get(address.country_code)
        data = {"country_code": address_format.country_code}
        for name, field in ADDRESS_FIELDS.items():
            value = (address.get_field(field) or "").strip()
            if value:
                data[name] = value
        if "country_area" in data:
            data["country_area"] = address_format.administrative_area_key(data["country_area"])

        try:
            i18naddress.normalize_address(data)
        except i18naddress.InvalidAddressError as e:
            return self._violations(address, e.errors)
        return []

    @staticmethod
    def _violations(address: Address, errors: dict[str, str]) -> list[Violation]:
        violations: list[Violation] = []
        for name, code in sorted(errors.items()):
            field = ADDRESS_FIELDS.get(name)
            if field is None:
                logger.debug(f"Ignoring {name} error for {address.country_code!r}: {code}")
                continue
            if code == ViolationCode.REQUIRED:
                message = "This value should not be blank."
            else:
                message = f"{address.get_field(field)!r} is not a valid {field.value.replace('_', ' ')}."
            violations.append(Violation(field=field, code=ViolationCode(code), message=message))
        return violations
