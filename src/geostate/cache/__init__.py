"""In-memory caching layer."""

from .decorators import cached
from .keys import CacheKeys
from .memory import ResolutionCache

__all__ = [
    "CacheKeys",
    "ResolutionCache",
    "cached",
]
