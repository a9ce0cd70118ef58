"""Pydantic models shared across service/controller layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WeatherResult(BaseModel):
    """Current conditions for one location, in API-native units."""

    model_config = ConfigDict(frozen=True)

    location: str
    temperature: float
    temperature_min: float
    temperature_max: float
    description: str
    icon_code: str


__all__ = ["WeatherResult"]
