"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from geostate import __version__
from geostate.api.routes import countries_router, health_router, states_router
from geostate.client import StateResolver
from geostate.config import GeostateSettings, get_settings
from geostate.core.exceptions import UnknownCountryError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Creates the state resolver unless one was injected, and closes it on shutdown.
    """
    settings: GeostateSettings = app.state.settings
    logging.getLogger("geostate").setLevel(settings.log_level.upper())

    if getattr(app.state, "resolver", None) is None:
        logger.info("Initializing state resolver...")
        app.state.resolver = StateResolver(settings)

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    app.state.resolver.close()
    logger.info("Application shutdown complete")


async def unknown_country_handler(request: Request, exc: UnknownCountryError) -> JSONResponse:
    """Map unknown country codes to 404 responses."""
    return JSONResponse(status_code=404, content={"detail": exc.message})


def create_app(
    *,
    settings: GeostateSettings | None = None,
    resolver: StateResolver | None = None,
    title: str = "Geostate API",
    description: str = "Resolve postal addresses to ISO 3166-2 subdivision codes",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings (cached environment settings if omitted)
        resolver: Pre-built resolver, mainly for tests
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.resolver = resolver

    app.add_exception_handler(UnknownCountryError, unknown_country_handler)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(states_router, prefix="/api/v1")
    app.include_router(countries_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
