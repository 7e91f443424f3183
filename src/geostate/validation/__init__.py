"""Address-format and subdivision validation."""

from geostate.validation.address import AddressFormatValidator
from geostate.validation.subdivision import SubdivisionValidator

__all__ = [
    "AddressFormatValidator",
    "SubdivisionValidator",
]
