"""Payload builders and fake collaborators used across tests."""

from __future__ import annotations

import asyncio
from typing import Any

from weatherscreen.domain.models import WeatherResult


def make_payload(name: str = "Paris", **main: Any) -> dict[str, Any]:
    temps = {"temp": 291.6, "temp_min": 289.9, "temp_max": 293.2}
    temps.update(main)
    return {
        "name": name,
        "main": temps,
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10n"}],
        "cod": 200,
    }


def make_result(location: str = "Paris") -> WeatherResult:
    return WeatherResult(
        location=location,
        temperature=291.6,
        temperature_min=289.9,
        temperature_max=293.2,
        description="light rain",
        icon_code="10n",
    )


class FakeWeatherClient:
    """Returns canned outcomes per city; optionally blocks until released."""

    def __init__(self, outcomes: dict[str, Any] | None = None) -> None:
        self.outcomes = outcomes or {}
        self.calls: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}
        self.started: dict[str, asyncio.Event] = {}

    def hold(self, city: str) -> None:
        self.gates[city] = asyncio.Event()
        self.started[city] = asyncio.Event()

    async def fetch(self, city: str) -> WeatherResult:
        self.calls.append(city)
        if city in self.gates:
            self.started[city].set()
            await self.gates[city].wait()
        outcome = self.outcomes.get(city, make_result(city))
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome
