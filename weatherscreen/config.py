"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WeatherApiSettings(BaseModel):
    api_key: SecretStr | None = None
    base_url: AnyHttpUrl = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="Current weather endpoint of the OpenWeatherMap API.",
    )
    units: Literal["standard", "metric", "imperial"] | None = Field(
        default=None,
        description="Unset keeps the API-native unit (kelvin).",
    )

    @field_validator("api_key", "units", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ConnectivitySettings(BaseModel):
    probe_url: AnyHttpUrl = Field(default="https://clients3.google.com/generate_204")
    probe_timeout_seconds: float = Field(default=3.0, gt=0, le=60)


class WeatherSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    default_locale: str = "en"

    api: WeatherApiSettings = Field(default_factory=WeatherApiSettings)
    connectivity: ConnectivitySettings = Field(default_factory=ConnectivitySettings)


@lru_cache
def get_settings() -> WeatherSettings:
    """Return cached settings instance."""

    return WeatherSettings()


__all__ = [
    "ConnectivitySettings",
    "WeatherApiSettings",
    "WeatherSettings",
    "get_settings",
]
