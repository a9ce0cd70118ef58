"""Domain-specific exceptions."""

from __future__ import annotations

from enum import Enum


class ServiceError(Exception):
    pass


class FetchErrorKind(str, Enum):
    EMPTY = "empty"
    NO_CONNECTION = "no_connection"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


class FetchError(ServiceError):
    """Terminal failure of a single fetch attempt."""

    kind: FetchErrorKind = FetchErrorKind.UNKNOWN


class EmptyQueryError(FetchError):
    kind = FetchErrorKind.EMPTY


class NoConnectionError(FetchError):
    kind = FetchErrorKind.NO_CONNECTION


class CityNotFoundError(FetchError):
    kind = FetchErrorKind.NOT_FOUND


class UnknownFetchError(FetchError):
    kind = FetchErrorKind.UNKNOWN

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


__all__ = [
    "CityNotFoundError",
    "EmptyQueryError",
    "FetchError",
    "FetchErrorKind",
    "NoConnectionError",
    "ServiceError",
    "UnknownFetchError",
]
