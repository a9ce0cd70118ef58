"""Wire settings, HTTP client, connectivity and controller for one screen."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from weatherscreen.config import WeatherSettings, get_settings
from weatherscreen.controllers.search import SearchController
from weatherscreen.logging import configure_logging, logger
from weatherscreen.services.connectivity import ConnectivityProvider, HttpConnectivityProbe
from weatherscreen.services.weather import WeatherClient


@asynccontextmanager
async def open_search_screen(
    settings: WeatherSettings | None = None,
    *,
    connectivity: ConnectivityProvider | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[SearchController]:
    """Yield an active :class:`SearchController` for the lifetime of the screen.

    The connectivity subscription and the HTTP client are released on every
    exit path. Without an explicit ``connectivity`` provider the screen probes
    reachability over HTTP with the same client, on open and on each submit;
    a host that needs live offline notices must await
    ``provider.is_connected()`` itself or push state through
    :class:`ManualConnectivity`.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level, environment=settings.environment)

    async with httpx.AsyncClient(transport=transport) as http_client:
        provider = connectivity or HttpConnectivityProbe(http_client, settings.connectivity)
        controller = SearchController(WeatherClient(http_client, settings.api), provider)
        logger.info("search_screen_opened", environment=settings.environment)
        async with controller:
            yield controller
        logger.info("search_screen_closed", environment=settings.environment)


__all__ = ["open_search_screen"]
