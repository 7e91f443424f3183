"""Service layer for orchestrating resolution."""

from geostate.services.resolution import StateResolutionService

__all__ = [
    "StateResolutionService",
]
