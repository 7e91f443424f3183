"""Tests for the address-format repository."""

from __future__ import annotations

import pytest

from geostate.core.exceptions import ReferenceDataError
from geostate.core.models import AddressFormat
from geostate.core.types import AddressField
from geostate.reference.address_formats import (
    I18nAddressFormatRepository,
    parse_required_fields,
)


class TestParseRequiredFields:
    """Tests for field-letter parsing."""

    def test_parses_letters(self):
        assert parse_required_fields("ACSZ") == frozenset(
            {
                AddressField.ADDRESS_LINE,
                AddressField.LOCALITY,
                AddressField.ADMINISTRATIVE_AREA,
                AddressField.POSTAL_CODE,
            }
        )

    def test_empty_string(self):
        assert parse_required_fields("") == frozenset()

    def test_unknown_letter(self):
        with pytest.raises(ReferenceDataError):
            parse_required_fields("AQ")


class TestI18nAddressFormatRepository:
    """Tests for address-format lookups."""

    @pytest.mark.parametrize(
        "code",
        ["US", "CA", "ES", "AU", "BR", "MX", "IT", "JP", "CO", "JM"],
    )
    def test_requires_administrative_area(
        self, address_formats: I18nAddressFormatRepository, code: str
    ):
        assert address_formats.get(code).requires_administrative_area is True

    @pytest.mark.parametrize("code", ["GB", "DE", "FR", "NL", "MY", "EG", "SR"])
    def test_does_not_require_administrative_area(
        self, address_formats: I18nAddressFormatRepository, code: str
    ):
        assert address_formats.get(code).requires_administrative_area is False

    def test_colombia_requires_address_line_and_department(
        self, address_formats: I18nAddressFormatRepository
    ):
        assert address_formats.get("CO").required_fields == frozenset(
            {AddressField.ADDRESS_LINE, AddressField.ADMINISTRATIVE_AREA}
        )

    def test_country_without_metadata_uses_defaults(
        self, address_formats: I18nAddressFormatRepository
    ):
        address_format = address_formats.get("AQ")
        assert address_format.country_code == "AQ"
        assert address_format.required_fields == frozenset(
            {AddressField.ADDRESS_LINE, AddressField.LOCALITY}
        )
        assert address_format.administrative_area_keys == {}

    def test_malformed_code_uses_defaults(self, address_formats: I18nAddressFormatRepository):
        assert address_formats.get("U-S").requires_administrative_area is False

    def test_lowercase_code(self, address_formats: I18nAddressFormatRepository):
        assert address_formats.get("us") is address_formats.get("US")

    def test_iso_suffixes_map_to_metadata_keys(self, address_formats: I18nAddressFormatRepository):
        keys = address_formats.get("CO").administrative_area_keys
        assert keys["ANT"] == "Antioquia"
        assert keys["DC"] == "Bogotá"


class TestAdministrativeAreaKey:
    """Tests for translating subdivision codes into metadata keys."""

    @pytest.fixture
    def colombia(self) -> AddressFormat:
        return AddressFormat(country_code="CO", administrative_area_keys={"ANT": "Antioquia"})

    def test_known_suffix(self, colombia: AddressFormat):
        assert colombia.administrative_area_key("CO-ANT") == "Antioquia"

    def test_lowercase_code_is_not_translated(self, colombia: AddressFormat):
        assert colombia.administrative_area_key("co-ant") == "co-ant"

    def test_unmapped_suffix_passes_through(self, colombia: AddressFormat):
        assert colombia.administrative_area_key("CO-QQ") == "QQ"

    def test_other_country_prefix_kept(self, colombia: AddressFormat):
        assert colombia.administrative_area_key("US-OK") == "US-OK"

    def test_bare_value_kept(self, colombia: AddressFormat):
        assert colombia.administrative_area_key("Antioquia") == "Antioquia"
