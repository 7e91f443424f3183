"""Memoization decorator for resolver methods."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Concatenate, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")
S = TypeVar("S")

logger = logging.getLogger(__name__)


def cached(
    key_builder: Callable[..., str],
) -> Callable[[Callable[Concatenate[S, P], R]], Callable[Concatenate[S, P], R]]:
    """
    Memoize a method's results in the instance's ``_cache``.

    Instances without a cache (``_cache`` missing or None) always call
    through. None results are not stored
    and are recomputed on the next call.

    Args:
        key_builder: Builds the cache key from the method's arguments
                     (without ``self``).

    Usage:
        @cached(CacheKeys.resolution)
        def get_state(self, zip: str, city: str, country: str) -> str | None:
            ...
    """

    def decorator(method: Callable[Concatenate[S, P], R]) -> Callable[Concatenate[S, P], R]:
        @wraps(method)
        def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> R:
            cache = getattr(self, "_cache", None)
            if cache is None:
                return method(self, *args, **kwargs)

            key = key_builder(*args, **kwargs)
            if key in cache:
                logger.debug(f"Cache hit: {key}")
                return cache.get(key)

            logger.debug(f"Cache miss: {key}")
            value = method(self, *args, **kwargs)
            if value is not None:
                cache.set(key, value)
            return value

        return wrapper

    return decorator
