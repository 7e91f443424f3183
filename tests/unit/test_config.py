"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from geostate.config import GeostateSettings, get_settings


class TestGeostateSettings:
    """Tests for GeostateSettings."""

    def test_defaults(self):
        settings = GeostateSettings(_env_file=None)

        assert settings.geocode_url == "https://maps.googleapis.com/maps/api/geocode/json"
        assert settings.geocode_api_key is None
        assert settings.geocode_timeout == 2.0
        assert settings.max_attempts == 3
        assert settings.pacing_delay == 1.0
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GEOSTATE_GEOCODE_URL", "https://geocode.internal/json")
        monkeypatch.setenv("GEOSTATE_GEOCODE_API_KEY", "secret")
        monkeypatch.setenv("GEOSTATE_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("GEOSTATE_PACING_DELAY", "0")

        settings = GeostateSettings(_env_file=None)

        assert settings.geocode_url == "https://geocode.internal/json"
        assert settings.geocode_api_key == "secret"
        assert settings.max_attempts == 5
        assert settings.pacing_delay == 0.0

    def test_case_insensitive_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("geostate_geocode_timeout", "4.5")

        assert GeostateSettings(_env_file=None).geocode_timeout == 4.5

    @pytest.mark.parametrize(
        "field,value",
        [
            ("max_attempts", 0),
            ("geocode_timeout", 0.0),
            ("pacing_delay", -1.0),
        ],
    )
    def test_rejects_invalid_values(self, field: str, value):
        with pytest.raises(ValidationError):
            GeostateSettings(_env_file=None, **{field: value})


class TestGetSettings:
    """Tests for the cached settings accessor."""

    @pytest.fixture(autouse=True)
    def fresh_cache(self):
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GEOSTATE_DEBUG", "true")

        assert get_settings().debug is True
