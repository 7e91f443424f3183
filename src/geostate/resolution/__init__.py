"""Resolution layer: matching geocoding candidates to subdivision codes."""

from geostate.resolution.matcher import (
    DEFAULT_STRATEGIES,
    StrategySpec,
    SubdivisionMatcher,
    format_code,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "StrategySpec",
    "SubdivisionMatcher",
    "format_code",
]
