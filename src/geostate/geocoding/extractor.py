"""Extraction of subdivision candidates from geocoding address components."""

from __future__ import annotations

from collections.abc import Iterable

from geostate.core.models import AddressComponent, CandidatePair
from geostate.core.types import ComponentType


def extract_candidates(components: Iterable[AddressComponent]) -> CandidatePair:
    """
    Collect administrative-area short names from address components.

    Components are scanned once in order. A component may carry both level
    tags. When several components share a tag the last one wins.
    """
    level_1: str | None = None
    level_2: str | None = None

    for component in components:
        if not component.types:
            continue
        if component.has_type(ComponentType.ADMINISTRATIVE_AREA_LEVEL_2):
            level_2 = component.short_name
        if component.has_type(ComponentType.ADMINISTRATIVE_AREA_LEVEL_1):
            level_1 = component.short_name

    return CandidatePair(
        administrative_area_level_1=level_1,
        administrative_area_level_2=level_2,
    )
