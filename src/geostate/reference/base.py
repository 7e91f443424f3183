"""Abstract read-only repositories for country reference data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from geostate.core.models import AddressFormat, Country, Subdivision


class CountryRepository(ABC):
    """Country codes and English display names."""

    @abstractmethod
    def get(self, country_code: str) -> Country:
        """
        Get a country by ISO 3166-1 alpha-2 code.

        Raises:
            UnknownCountryError: If the code is not in the dataset
        """
        ...

    @abstractmethod
    def list(self) -> list[Country]:
        """List all countries ordered by code."""
        ...

    def get_name(self, country_code: str) -> str:
        """English display name for a country code."""
        return self.get(country_code).name


class SubdivisionRepository(ABC):
    """Per-country subdivision lists."""

    @abstractmethod
    def get_all(self, country_code: str) -> list[Subdivision]:
        """
        List a country's subdivisions ordered by code.

        Raises:
            UnknownCountryError: If the code is not in the dataset
        """
        ...

    def find_by_name(self, country_code: str, name: str) -> Subdivision | None:
        """Find a subdivision by case-insensitive exact name."""
        wanted = name.casefold()
        for subdivision in self.get_all(country_code):
            # Some names carry alternatives separated by ";"
            names = [subdivision.name, *subdivision.name.split(";")]
            if any(candidate.strip().casefold() == wanted for candidate in names):
                return subdivision
        return None


class AddressFormatRepository(ABC):
    """Per-country address-format metadata."""

    @abstractmethod
    def get(self, country_code: str) -> AddressFormat:
        """Get the address format for a country."""
        ...
