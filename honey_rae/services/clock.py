from __future__ import annotations

from collections.abc import Callable
from datetime import date

_today_provider: Callable[[], date] | None = None


def set_today_provider(provider: Callable[[], date] | None) -> None:
    global _today_provider
    _today_provider = provider


def today() -> date:
    if _today_provider is None:
        return date.today()
    return _today_provider()
