"""Geocoding HTTP client with pacing, timeout and bounded retries."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, Field

from geostate.core.exceptions import GeocodeUnavailableError
from geostate.core.models import GeocodeResponse
from geostate.core.types import AttemptOutcome
from geostate.geocoding.query import GeocodeQuery
from geostate.geocoding.retry import RetryPolicy

if TYPE_CHECKING:
    from geostate.config import GeostateSettings

logger = logging.getLogger(__name__)

DEFAULT_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GeocodeConfig(BaseModel):
    """Configuration for the geocoding client."""

    url: str = DEFAULT_GEOCODE_URL
    api_key: str | None = None
    timeout: float = Field(default=2.0, gt=0.0)
    max_attempts: int = Field(default=3, ge=1)
    pacing_delay: float = Field(default=1.0, ge=0.0)
    user_agent: str = "geostate/0.1"

    @classmethod
    def from_settings(cls, settings: GeostateSettings) -> GeocodeConfig:
        return cls(
            url=settings.geocode_url,
            api_key=settings.geocode_api_key,
            timeout=settings.geocode_timeout,
            max_attempts=settings.max_attempts,
            pacing_delay=settings.pacing_delay,
            user_agent=settings.user_agent,
        )


class GeocodeClient:
    """
    Client for a Google-style geocoding JSON endpoint.

    Provides:
    - Pooled HTTP client with explicit lifecycle
    - Pacing delay before each resolution's request sequence
    - Bounded retries on transport errors and non-2xx responses
    - Soft failure: every failure mode surfaces as None
    """

    def __init__(
        self,
        config: GeocodeConfig | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or GeocodeConfig()
        self._sleep = sleep
        self._transport = transport
        self._client: httpx.Client | None = None
        self._client_lock = threading.Lock()
        self._retry_policy = RetryPolicy(
            max_attempts=self.config.max_attempts,
            retry_on=(GeocodeUnavailableError,),
        )

    @contextmanager
    def _get_client(self) -> Iterator[httpx.Client]:
        """Get or create HTTP client, translating transport errors."""
        client = self._client
        if client is None or client.is_closed:
            # Shared by every worker thread
            with self._client_lock:
                if self._client is None or self._client.is_closed:
                    self._client = httpx.Client(
                        timeout=httpx.Timeout(self.config.timeout),
                        headers=self._get_default_headers(),
                        follow_redirects=True,
                        transport=self._transport,
                    )
                client = self._client

        try:
            yield client
        except httpx.HTTPError as e:
            raise GeocodeUnavailableError(message=f"HTTP error: {e}") from e

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    def close(self) -> None:
        """Close the HTTP client."""
        with self._client_lock:
            if self._client and not self._client.is_closed:
                self._client.close()
            self._client = None

    def fetch(self, query: GeocodeQuery) -> GeocodeResponse | None:
        """
        Geocode a query.

        Returns:
            The parsed response when the first result has address components,
            None on exhausted retries, malformed bodies or empty results
        """
        self._pace()
        logger.debug(f"Geocoding address={query.encoded}")

        outcome = self._retry_policy.run(
            lambda: self._request(query),
            self._classify,
        )
        if not outcome.success:
            logger.warning(
                f"Geocoding failed after {outcome.attempts} attempts: {query.address} "
                f"({'; '.join(outcome.failures)})"
            )
            return None

        return self._parse(outcome.value)

    def _pace(self) -> None:
        if self.config.pacing_delay > 0:
            self._sleep(self.config.pacing_delay)

    def _request(self, query: GeocodeQuery) -> httpx.Response:
        with self._get_client() as client:
            return client.get(
                self.config.url,
                params=query.to_params(self.config.api_key),
            )

    @staticmethod
    def _classify(response: httpx.Response) -> AttemptOutcome:
        if response.is_success:
            return AttemptOutcome.SUCCESS
        return AttemptOutcome.RETRYABLE

    def _parse(self, response: httpx.Response) -> GeocodeResponse | None:
        try:
            # ValueError covers both JSON decoding and pydantic validation errors
            parsed = GeocodeResponse.model_validate(response.json())
        except ValueError as e:
            logger.warning(f"Malformed geocoding response: {e}")
            return None

        if parsed.status and parsed.status != "OK":
            logger.warning(f"Geocoding service status: {parsed.status}")

        if not parsed.first_components:
            logger.debug("Geocoding response has no address components")
            return None

        return parsed

    def __enter__(self) -> GeocodeClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
