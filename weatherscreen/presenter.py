"""Turn search state into display-ready text."""

from __future__ import annotations

import math
from dataclasses import dataclass

from weatherscreen.controllers.search import AttemptPhase, SearchState
from weatherscreen.domain.models import WeatherResult
from weatherscreen.i18n import I18nService
from weatherscreen.icons import icon_for
from weatherscreen.services.exceptions import FetchError


@dataclass(frozen=True, slots=True)
class WeatherCard:
    location: str
    temperature: str
    description: str
    icon: str
    temperature_range: str


@dataclass(frozen=True, slots=True)
class WeatherView:
    card: WeatherCard | None = None
    error_message: str | None = None
    loading: bool = False


def round_half_up(value: float) -> int:
    # Halves go up (-0.5 -> 0), unlike Python's round().
    return math.floor(value + 0.5)


def build_card(result: WeatherResult, i18n: I18nService, locale: str | None = None) -> WeatherCard:
    return WeatherCard(
        location=result.location,
        temperature=i18n.gettext("card.temperature", locale=locale, value=round_half_up(result.temperature)),
        description=result.description,
        icon=icon_for(result.icon_code),
        temperature_range=i18n.gettext(
            "card.range",
            locale=locale,
            high=round_half_up(result.temperature_max),
            low=round_half_up(result.temperature_min),
        ),
    )


def error_message(error: FetchError, i18n: I18nService, locale: str | None = None) -> str:
    """User-facing text for a failed attempt; never includes diagnostic detail."""

    return i18n.gettext(f"error.{error.kind.value}", locale=locale)


def present(state: SearchState, i18n: I18nService, locale: str | None = None) -> WeatherView:
    loading = state.phase in (AttemptPhase.VALIDATING, AttemptPhase.FETCHING)
    if state.error is not None:
        return WeatherView(error_message=error_message(state.error, i18n, locale), loading=loading)
    if state.result is not None:
        return WeatherView(card=build_card(state.result, i18n, locale), loading=loading)
    return WeatherView(loading=loading)


__all__ = [
    "WeatherCard",
    "WeatherView",
    "build_card",
    "error_message",
    "present",
    "round_half_up",
]
