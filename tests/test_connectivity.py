"""Tests for connectivity providers."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from weatherscreen.config import ConnectivitySettings
from weatherscreen.services.connectivity import HttpConnectivityProbe, ManualConnectivity


@pytest.mark.asyncio
async def test_manual_connectivity_publishes_changes_only():
    provider = ManualConnectivity(True)
    events: list[bool] = []
    unsubscribe = provider.subscribe(events.append)

    provider.set_connected(True)
    provider.set_connected(False)
    provider.set_connected(False)
    provider.set_connected(True)

    assert events == [False, True]
    assert await provider.is_connected() is True

    unsubscribe()
    unsubscribe()
    provider.set_connected(False)
    assert events == [False, True]
    assert provider.listener_count == 0


def test_listener_errors_do_not_stop_delivery():
    provider = ManualConnectivity(True)
    events: list[bool] = []

    def broken(connected: bool) -> None:
        raise RuntimeError("boom")

    provider.subscribe(broken)
    provider.subscribe(events.append)
    provider.set_connected(False)

    assert events == [False]


@pytest.mark.asyncio
async def test_http_probe_reports_reachability_and_changes():
    online = {"value": True}
    timeouts: list[dict] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        timeouts.append(request.extensions.get("timeout"))
        assert request.url == httpx.URL("https://probe.example/generate_204")
        if not online["value"]:
            raise httpx.ConnectError("network unreachable", request=request)
        return httpx.Response(204)

    settings = ConnectivitySettings(probe_url="https://probe.example/generate_204", probe_timeout_seconds=1.5)
    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        probe = HttpConnectivityProbe(client, settings=settings)
        events: list[bool] = []
        probe.subscribe(events.append)

        assert await probe.is_connected() is True
        assert await probe.is_connected() is True
        online["value"] = False
        assert await probe.is_connected() is False

    assert events == [True, False]
    assert timeouts[0]["connect"] == 1.5


@pytest.mark.asyncio
async def test_http_probe_treats_server_errors_as_offline():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        probe = HttpConnectivityProbe(client)
        assert await probe.is_connected() is False


@pytest.mark.asyncio
async def test_http_probe_only_reports_changes_when_checked():
    online = {"value": True}

    async def handler(request: httpx.Request) -> httpx.Response:
        if not online["value"]:
            raise httpx.ConnectError("network unreachable", request=request)
        return httpx.Response(204)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        probe = HttpConnectivityProbe(client)
        events: list[bool] = []
        probe.subscribe(events.append)

        assert await probe.is_connected() is True
        online["value"] = False
        await asyncio.sleep(0)
        assert events == [True]

        assert await probe.is_connected() is False
        assert events == [True, False]
