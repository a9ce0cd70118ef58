"""Network reachability providers."""

from __future__ import annotations

from typing import Callable, Protocol

import httpx

from weatherscreen.config import ConnectivitySettings
from weatherscreen.logging import logger

ConnectivityListener = Callable[[bool], None]
Unsubscribe = Callable[[], None]


class ConnectivityProvider(Protocol):
    async def is_connected(self) -> bool: ...

    def subscribe(self, listener: ConnectivityListener) -> Unsubscribe: ...


class _BaseConnectivity:
    def __init__(self) -> None:
        self._listeners: list[ConnectivityListener] = []
        self._last: bool | None = None

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ConnectivityListener) -> Unsubscribe:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self, connected: bool) -> None:
        if connected == self._last:
            return
        self._last = connected
        logger.info("connectivity_changed", connected=connected)
        for listener in list(self._listeners):
            try:
                listener(connected)
            except Exception:
                logger.exception("connectivity_listener_failed")


class ManualConnectivity(_BaseConnectivity):
    """Connectivity pushed in by the host platform."""

    def __init__(self, connected: bool = True) -> None:
        super().__init__()
        self._last = connected

    async def is_connected(self) -> bool:
        return bool(self._last)

    def set_connected(self, connected: bool) -> None:
        self._publish(connected)


class HttpConnectivityProbe(_BaseConnectivity):
    """Point-in-time reachability check against a lightweight HTTP endpoint.

    Nothing polls the endpoint. A check that observes a different answer than
    the previous one is published to subscribers, and checks only happen when
    :meth:`is_connected` is awaited: by the controller on activation and on
    each submit without an explicit flag, or by the host on its own schedule.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ConnectivitySettings | None = None,
    ) -> None:
        super().__init__()
        self._client = http_client
        self._settings = settings or ConnectivitySettings()

    async def is_connected(self) -> bool:
        try:
            response = await self._client.get(
                str(self._settings.probe_url),
                timeout=self._settings.probe_timeout_seconds,
            )
        except httpx.RequestError as exc:
            logger.debug("connectivity_probe_failed", error=str(exc))
            connected = False
        else:
            connected = response.status_code < 500
        self._publish(connected)
        return connected


__all__ = [
    "ConnectivityListener",
    "ConnectivityProvider",
    "HttpConnectivityProbe",
    "ManualConnectivity",
    "Unsubscribe",
]
