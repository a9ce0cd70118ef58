"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from weatherscreen.config import WeatherApiSettings


@pytest.fixture
def api_settings() -> WeatherApiSettings:
    return WeatherApiSettings(
        api_key=SecretStr("test-key"),
        base_url="https://weather.example/data/2.5/weather",
    )
