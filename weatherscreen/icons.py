"""Map OpenWeatherMap icon codes onto presentation icon categories."""

from __future__ import annotations

FALLBACK_ICON = "help-circle"

ICON_CATEGORIES = {
    "01d": "sun",
    "01n": "moon",
    "02d": "cloud",
    "02n": "cloud",
    "03d": "cloud",
    "03n": "cloud",
    "04d": "cloud",
    "04n": "cloud",
    "09d": "cloud-rain",
    "09n": "cloud-rain",
    "10d": "cloud-drizzle",
    "10n": "cloud-drizzle",
    "11d": "cloud-lightning",
    "11n": "cloud-lightning",
    "13d": "cloud-snow",
    "13n": "cloud-snow",
    "50d": "cloud",
    "50n": "cloud",
}


def icon_for(code: str | None) -> str:
    if not code:
        return FALLBACK_ICON
    return ICON_CATEGORIES.get(code, FALLBACK_ICON)


__all__ = ["FALLBACK_ICON", "ICON_CATEGORIES", "icon_for"]
