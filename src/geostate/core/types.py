"""Core enums and type definitions."""

from enum import StrEnum

# "{COUNTRY}-{CODE}", e.g. "US-OK"
SubdivisionCode = str


class ComponentType(StrEnum):
    """Geocoding address component type tags that carry subdivision candidates."""

    ADMINISTRATIVE_AREA_LEVEL_1 = "administrative_area_level_1"
    ADMINISTRATIVE_AREA_LEVEL_2 = "administrative_area_level_2"


class AddressField(StrEnum):
    """Address fields known to the address-format ruleset."""

    ADMINISTRATIVE_AREA = "administrative_area"
    LOCALITY = "locality"
    DEPENDENT_LOCALITY = "dependent_locality"
    POSTAL_CODE = "postal_code"
    SORTING_CODE = "sorting_code"
    ADDRESS_LINE = "address_line"
    ORGANIZATION = "organization"
    RECIPIENT = "recipient"


class ViolationCode(StrEnum):
    """Kinds of address-format violations."""

    REQUIRED = "required"
    INVALID = "invalid"


class MatchStrategy(StrEnum):
    """Subdivision matching strategies, listed in priority order."""

    LEVEL_2_CODE = "level_2_code"
    LEVEL_1_CODE = "level_1_code"
    LEVEL_2_NAME = "level_2_name"
    LEVEL_1_NAME = "level_1_name"


class AttemptOutcome(StrEnum):
    """Classification of a single geocoding request attempt."""

    SUCCESS = "success"
    RETRYABLE = "retryable"
