"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeostateSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOSTATE_",
    )

    # Geocoding service
    geocode_url: str = Field(
        default="https://maps.googleapis.com/maps/api/geocode/json",
        description="Geocoding endpoint accepting an 'address' query parameter",
    )
    geocode_api_key: str | None = Field(
        default=None,
        description="API key sent as the 'key' query parameter (optional)",
    )
    geocode_timeout: float = Field(
        default=2.0,
        gt=0.0,
        description="Per-request timeout in seconds",
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total request attempts per resolution",
    )
    pacing_delay: float = Field(
        default=1.0,
        ge=0.0,
        description="Seconds to wait before each resolution's requests",
    )
    user_agent: str = Field(
        default="geostate/0.1",
        description="User-Agent header sent to the geocoding service",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> GeostateSettings:
    """Get cached settings instance."""
    return GeostateSettings()
