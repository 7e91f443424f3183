"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from geostate.client import StateResolver


def get_resolver(request: Request) -> StateResolver:
    """Get the state resolver from app state."""
    return request.app.state.resolver


# Type alias for cleaner dependency injection
Resolver = Annotated[StateResolver, Depends(get_resolver)]
