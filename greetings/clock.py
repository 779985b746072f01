"""Clock callables injected wherever "today" matters."""

from __future__ import annotations

from datetime import date

from .types import Clock


def system_clock() -> date:
    return date.today()


def fixed_clock(day: date) -> Clock:
    """Return a clock that always reports `day`."""

    def now() -> date:
        return day

    return now
