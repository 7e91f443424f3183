"""Subdivision code validation against per-country address requirements."""

from __future__ import annotations

import logging

from geostate.core.models import Address
from geostate.core.types import AddressField
from geostate.reference.base import AddressFormatRepository
from geostate.validation.address import AddressFormatValidator

logger = logging.getLogger(__name__)


class SubdivisionValidator:
    """Decides whether a candidate subdivision code is acceptable for a country."""

    def __init__(
        self,
        address_formats: AddressFormatRepository,
        address_validator: AddressFormatValidator,
    ) -> None:
        self._address_formats = address_formats
        self._address_validator = address_validator

    def validate(self, country: str, state_code: str) -> bool:
        """
        Validate a subdivision code for a country.

        Countries whose address format does not require an administrative area
        accept any value. Otherwise a minimal address is checked and only an
        administrative-area violation rejects the code; other violations
        (missing postal code, locality, ...) are ignored.

        Args:
            country: ISO 3166-1 alpha-2 country code
            state_code: Candidate code, e.g. "US-OK"

        Returns:
            True if the code is acceptable
        """
        if not self._address_formats.get(country).requires_administrative_area:
            return True

        address = Address(country_code=country, administrative_area=state_code)
        violations = self._address_validator.validate(address)
        for violation in violations:
            if violation.field == AddressField.ADMINISTRATIVE_AREA:
                logger.debug(f"Rejected {state_code!r} for {country}: {violation.message}")
                return False
        return True
