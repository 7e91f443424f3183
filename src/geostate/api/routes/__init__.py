"""API route modules."""

from geostate.api.routes.countries import router as countries_router
from geostate.api.routes.health import router as health_router
from geostate.api.routes.states import router as states_router

__all__ = [
    "countries_router",
    "health_router",
    "states_router",
]
