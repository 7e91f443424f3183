"""Bounded retry combinator for geocoding requests."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from geostate.core.types import AttemptOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryResult(Generic[T]):
    """Outcome of a bounded retry run."""

    value: T | None = None
    attempts: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.value is not None


@dataclass(frozen=True)
class RetryPolicy:
    """
    Attempt an operation up to ``max_attempts`` times.

    Each attempt is classified as SUCCESS or RETRYABLE. Exceptions listed in
    ``retry_on`` count as RETRYABLE; anything else propagates. The run stops on
    the first SUCCESS or when the attempt budget is exhausted. There is no
    delay between attempts.
    """

    max_attempts: int = 3
    retry_on: tuple[type[Exception], ...] = (Exception,)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def run(
        self,
        attempt: Callable[[], T],
        classify: Callable[[T], AttemptOutcome],
    ) -> RetryResult[T]:
        """
        Run the operation with bounded retries.

        Args:
            attempt: Zero-argument callable performing one attempt
            classify: Maps an attempt's return value to an outcome

        Returns:
            RetryResult holding the successful value, or no value when every
            attempt failed
        """
        result: RetryResult[T] = RetryResult()

        for number in range(1, self.max_attempts + 1):
            result.attempts = number
            try:
                value = attempt()
            except self.retry_on as e:
                logger.debug(f"Attempt {number}/{self.max_attempts} raised: {e}")
                result.failures.append(f"{type(e).__name__}: {e}")
                continue

            if classify(value) == AttemptOutcome.SUCCESS:
                result.value = value
                return result

            logger.debug(f"Attempt {number}/{self.max_attempts} failed: {value!r}")
            result.failures.append(repr(value))

        return result
