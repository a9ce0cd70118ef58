"""City search state and the fetch-attempt workflow behind it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Protocol

from weatherscreen.domain.models import WeatherResult
from weatherscreen.logging import logger
from weatherscreen.services.connectivity import ConnectivityProvider, Unsubscribe
from weatherscreen.services.exceptions import (
    EmptyQueryError,
    FetchError,
    NoConnectionError,
    UnknownFetchError,
)


class AttemptPhase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING = "fetching"
    SHOWING_RESULT = "showing_result"
    SHOWING_ERROR = "showing_error"


@dataclass(frozen=True, slots=True)
class SearchState:
    query: str = ""
    phase: AttemptPhase = AttemptPhase.IDLE
    result: WeatherResult | None = None
    error: FetchError | None = None
    connected: bool = True
    attempt: int = 0

    def __post_init__(self) -> None:
        if self.result is not None and self.error is not None:
            raise ValueError("SearchState cannot hold a result and an error at once.")


class WeatherFetcher(Protocol):
    async def fetch(self, city: str) -> WeatherResult: ...


StateListener = Callable[[SearchState], None]


class SearchController:
    """Owns the screen state and runs one fetch attempt per ``submit``.

    State only changes through :meth:`_transition`, which notifies every
    subscribed listener with the new immutable :class:`SearchState`. Each
    ``submit`` bumps ``attempt``; an attempt that settles after a newer one
    has started is dropped instead of overwriting the newer outcome.
    """

    def __init__(self, client: WeatherFetcher, connectivity: ConnectivityProvider) -> None:
        self._client = client
        self._connectivity = connectivity
        self._state = SearchState()
        self._listeners: list[StateListener] = []
        self._connectivity_unsubscribe: Unsubscribe | None = None

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def last_query(self) -> str:
        return self._state.query

    @property
    def last_result(self) -> WeatherResult | None:
        return self._state.result

    @property
    def last_error(self) -> FetchError | None:
        return self._state.error

    @property
    def connected(self) -> bool:
        return self._state.connected

    @property
    def is_active(self) -> bool:
        return self._connectivity_unsubscribe is not None

    def subscribe(self, listener: StateListener) -> Unsubscribe:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def activate(self) -> None:
        """Start listening for connectivity changes and apply the current state."""

        if self.is_active:
            return
        self._connectivity_unsubscribe = self._connectivity.subscribe(self._on_connectivity_change)
        try:
            connected = await self._connectivity.is_connected()
        except BaseException:
            self.teardown()
            raise
        self._on_connectivity_change(connected)

    def teardown(self) -> None:
        unsubscribe, self._connectivity_unsubscribe = self._connectivity_unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()

    async def __aenter__(self) -> SearchController:
        await self.activate()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.teardown()

    def set_query(self, text: str) -> None:
        self._transition(query=text)

    async def submit(self, city: str | None = None, connected: bool | None = None) -> SearchState:
        if city is None:
            city = self._state.query
        attempt = self._state.attempt + 1
        self._transition(query=city, phase=AttemptPhase.VALIDATING, attempt=attempt)

        try:
            if connected is None:
                connected = await self._connectivity.is_connected()
                if self._is_stale(attempt):
                    return self._state
            self._transition(connected=connected)

            # Connectivity is checked before the query itself.
            if not connected:
                return self._reject(NoConnectionError())
            if city == "":
                return self._reject(EmptyQueryError())

            self._transition(phase=AttemptPhase.FETCHING)
            result = await self._client.fetch(city)
        except FetchError as exc:
            if not self._is_stale(attempt):
                self._transition(phase=AttemptPhase.SHOWING_ERROR, result=None, error=exc)
            return self._state
        except Exception as exc:
            if not self._is_stale(attempt):
                logger.exception("search_attempt_failed", attempt=attempt)
                self._transition(
                    phase=AttemptPhase.SHOWING_ERROR,
                    result=None,
                    error=UnknownFetchError(repr(exc)),
                )
            raise

        if not self._is_stale(attempt):
            self._transition(phase=AttemptPhase.SHOWING_RESULT, result=result, error=None)
        return self._state

    def _reject(self, error: FetchError) -> SearchState:
        logger.info("search_rejected", reason=error.kind.value, attempt=self._state.attempt)
        self._transition(phase=AttemptPhase.SHOWING_ERROR, result=None, error=error)
        return self._state

    def _is_stale(self, attempt: int) -> bool:
        if attempt == self._state.attempt:
            return False
        logger.info(
            "search_stale_result_discarded",
            attempt=attempt,
            latest_attempt=self._state.attempt,
        )
        return True

    def _on_connectivity_change(self, connected: bool) -> None:
        state = self._state
        if not connected and state.phase in (AttemptPhase.IDLE, AttemptPhase.SHOWING_ERROR):
            self._transition(connected=False, phase=AttemptPhase.SHOWING_ERROR, error=NoConnectionError())
        elif connected and isinstance(state.error, NoConnectionError):
            self._transition(connected=True, phase=AttemptPhase.IDLE, error=None)
        else:
            self._transition(connected=connected)

    def _transition(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("search_listener_failed")


__all__ = [
    "AttemptPhase",
    "SearchController",
    "SearchState",
    "StateListener",
    "WeatherFetcher",
]
