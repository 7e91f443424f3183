"""Custom exception hierarchy for geostate."""

from typing import Any


class GeostateError(Exception):
    """Base exception for all geostate errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnknownCountryError(GeostateError):
    """Country code is not part of the reference dataset."""

    def __init__(
        self,
        country_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Unknown country code: {country_code!r}", details)
        self.country_code = country_code


class ReferenceDataError(GeostateError):
    """Reference dataset is missing or malformed."""

    pass


class GeocodeError(GeostateError):
    """Geocoding request failed."""

    pass


class GeocodeUnavailableError(GeocodeError):
    """Geocoding service returned a non-2xx response or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
