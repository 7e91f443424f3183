"""Domain models for address queries, geocoding payloads and reference data."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import AddressField, ComponentType, MatchStrategy, ViolationCode


class AddressQuery(BaseModel):
    """Input of a single resolution call."""

    model_config = ConfigDict(frozen=True)

    zip: str = Field(..., description="ZIP or postal code")
    city: str = Field(..., description="City or locality name")
    country: str = Field(..., description="ISO 3166-1 alpha-2 country code")


# ============================================================================
# Geocoding payload
# ============================================================================


class AddressComponent(BaseModel):
    """One entry of a geocoding result's address_components."""

    long_name: str | None = None
    short_name: str | None = None
    types: set[str] | None = None

    def has_type(self, component_type: ComponentType | str) -> bool:
        return bool(self.types) and str(component_type) in self.types


class GeocodeResult(BaseModel):
    """A single geocoding match."""

    address_components: list[AddressComponent] = Field(default_factory=list)
    formatted_address: str | None = None
    place_id: str | None = None


class GeocodeResponse(BaseModel):
    """Top-level geocoding response body."""

    results: list[GeocodeResult] = Field(default_factory=list)
    status: str | None = None

    @property
    def first_components(self) -> list[AddressComponent]:
        """Address components of the first result, empty when there is none."""
        if not self.results:
            return []
        return self.results[0].address_components


class CandidatePair(BaseModel):
    """Subdivision candidates extracted from a geocoding result."""

    model_config = ConfigDict(frozen=True)

    administrative_area_level_1: str | None = None
    administrative_area_level_2: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.administrative_area_level_1 or self.administrative_area_level_2)


class MatchResult(BaseModel):
    """A validated subdivision code and the strategy that produced it."""

    model_config = ConfigDict(frozen=True)

    code: str
    strategy: MatchStrategy
    candidate: str


# ============================================================================
# Reference data
# ============================================================================


class Country(BaseModel):
    """Country entry from the reference dataset."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="ISO 3166-1 alpha-2 code")
    name: str = Field(..., description="English display name")


class Subdivision(BaseModel):
    """Subdivision entry from the reference dataset."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="ISO 3166-2 code, e.g. US-OK")
    name: str
    type: str | None = None
    parent_code: str | None = None


class AddressFormat(BaseModel):
    """Per-country address-format metadata."""

    model_config = ConfigDict(frozen=True)

    country_code: str
    required_fields: frozenset[AddressField] = Field(default_factory=frozenset)
    administrative_area_keys: dict[str, str] = Field(
        default_factory=dict,
        description="ISO 3166-2 suffix to address-metadata key, e.g. ANT -> Antioquia",
    )

    @property
    def requires_administrative_area(self) -> bool:
        return AddressField.ADMINISTRATIVE_AREA in self.required_fields

    def administrative_area_key(self, code: str) -> str:
        """Translate a subdivision code such as "CO-ANT" into the key the address metadata uses."""
        prefix, sep, suffix = code.partition("-")
        if not sep or prefix != self.country_code:
            return code
        return self.administrative_area_keys.get(suffix, suffix)


class Address(BaseModel):
    """Minimal address used for address-format validation."""

    model_config = ConfigDict(frozen=True)

    country_code: str
    administrative_area: str | None = None
    locality: str | None = None
    dependent_locality: str | None = None
    postal_code: str | None = None
    sorting_code: str | None = None
    address_line: str | None = None
    organization: str | None = None
    recipient: str | None = None

    def get_field(self, field: AddressField) -> str | None:
        return getattr(self, field.value)


class Violation(BaseModel):
    """An address-format rule violation on a single field."""

    model_config = ConfigDict(frozen=True)

    field: AddressField
    code: ViolationCode
    message: str
