"""File-based i18n helper with in-memory caching."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any


class I18nService:
    """Look up screen strings by key.

    Device locales such as ``es-MX`` or ``pt_BR`` resolve to the exact file
    first, then to the base language, then to the default locale. A key found
    nowhere is returned unchanged.
    """

    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = "en") -> None:
        self.locales_path = Path(locales_path or Path(__file__).with_name("locales"))
        self.default_locale = default_locale.lower()

    def gettext(self, key: str, *, locale: str | None = None, **kwargs: Any) -> str:
        text = None
        for candidate in self.locale_chain(locale):
            text = self._lookup(candidate, key)
            if text is not None:
                break
        if text is None:
            text = key
        return text.format(**kwargs) if kwargs else text

    def locale_chain(self, locale: str | None) -> list[str]:
        chain: list[str] = []
        if locale:
            normalized = locale.strip().lower().replace("_", "-")
            chain.append(normalized)
            base = normalized.split("-", 1)[0]
            if base not in chain:
                chain.append(base)
        if self.default_locale not in chain:
            chain.append(self.default_locale)
        return chain

    def available_locales(self) -> list[str]:
        return sorted(path.stem for path in self.locales_path.glob("*.json"))

    @lru_cache(maxsize=16)
    def _load_locale(self, locale: str) -> dict[str, str]:
        file_path = self.locales_path / f"{locale}.json"
        if not file_path.exists():
            return {}
        with file_path.open("r", encoding="utf-8") as fp:
            return json.load(fp)

    def _lookup(self, locale: str, key: str) -> str | None:
        return self._load_locale(locale).get(key)


__all__ = ["I18nService"]
