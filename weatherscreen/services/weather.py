"""OpenWeatherMap current-weather client."""

from __future__ import annotations

from typing import Any

import httpx

from weatherscreen.config import WeatherApiSettings
from weatherscreen.domain.models import WeatherResult
from weatherscreen.logging import logger
from weatherscreen.services.exceptions import CityNotFoundError, UnknownFetchError


class WeatherClient:
    """Fetch current conditions for a city name.

    The caller is expected to reject empty city names before calling
    :meth:`fetch`. There are no retries and no caching; the timeout is
    whatever the injected ``httpx.AsyncClient`` uses.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: WeatherApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or WeatherApiSettings()

    @staticmethod
    def _read_secret(secret: Any) -> str | None:
        if not secret:
            return None
        try:
            return secret.get_secret_value()
        except AttributeError:
            return str(secret)

    def build_params(self, city: str, api_key: str) -> dict[str, str]:
        params = {"q": city, "appid": api_key}
        if self._settings.units:
            params["units"] = self._settings.units
        return params

    async def fetch(self, city: str) -> WeatherResult:
        api_key = self._read_secret(self._settings.api_key)
        if not api_key:
            raise UnknownFetchError("weather API key is not configured")

        try:
            response = await self._client.get(
                str(self._settings.base_url),
                params=self.build_params(city, api_key),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            if status_code == 404:
                logger.info("weather_city_not_found", city=city)
                raise CityNotFoundError(city) from exc
            detail = exc.response.text[:500] if exc.response is not None else str(exc)
            raise self._unknown(city, f"Weather request failed ({status_code}): {detail}") from exc
        except httpx.RequestError as exc:
            raise self._unknown(city, f"Weather request failed: {exc!r}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise self._unknown(city, "Weather response is not valid JSON.") from exc
        if not isinstance(data, dict):
            raise self._unknown(city, "Weather response format is invalid.")

        if not data.get("name"):
            logger.info("weather_city_not_found", city=city, reason="missing_name")
            raise CityNotFoundError(city)

        try:
            result = self._to_result(data)
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise self._unknown(city, f"Weather response is missing fields: {exc!r}") from exc

        logger.debug("weather_fetch_succeeded", city=city, payload=data)
        return result

    @staticmethod
    def _to_result(data: dict[str, Any]) -> WeatherResult:
        main = data["main"]
        condition = data["weather"][0]
        return WeatherResult(
            location=data["name"],
            temperature=main["temp"],
            temperature_min=main["temp_min"],
            temperature_max=main["temp_max"],
            description=condition["description"],
            icon_code=condition["icon"],
        )

    @staticmethod
    def _unknown(city: str, detail: str) -> UnknownFetchError:
        logger.error("weather_fetch_failed", city=city, detail=detail)
        return UnknownFetchError(detail)


__all__ = ["WeatherClient"]
