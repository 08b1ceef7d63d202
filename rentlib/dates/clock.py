"""
Time sources used wherever "today" is needed.

Core logic receives a :class:`Clock` instead of reading the wall clock, so
overdue checks and dashboard counts can be evaluated against any day.
"""

import os
from datetime import date, datetime
from typing import Optional, Protocol, runtime_checkable

from dateutil import tz

from .calendar_date import DateLike, to_date

DEFAULT_TIMEZONE = "America/Sao_Paulo"


@runtime_checkable
class Clock(Protocol):
    """Protocol for anything that can tell the current calendar date."""

    def today(self) -> date:
        ...


class SystemClock:
    """Wall clock read in the business time zone."""

    def __init__(self, timezone: Optional[str] = None):
        """
        Initialize system clock.

        Args:
            timezone: IANA zone name (defaults to env var RENTLIB_TIMEZONE,
                then America/Sao_Paulo)
        """
        # An empty setting counts as unset
        self.timezone_name = timezone or os.getenv("RENTLIB_TIMEZONE", "").strip() or DEFAULT_TIMEZONE
        self._tz = tz.gettz(self.timezone_name)
        if self._tz is None:
            raise ValueError(f"Unknown time zone: {self.timezone_name}")

    def today(self) -> date:
        return datetime.now(self._tz).date()

    def __repr__(self) -> str:
        return f"SystemClock({self.timezone_name!r})"


class FixedClock:
    """Clock frozen on a given day."""

    def __init__(self, today: DateLike):
        self._today = to_date(today)

    def today(self) -> date:
        return self._today

    def __repr__(self) -> str:
        return f"FixedClock({self._today.isoformat()!r})"


_DEFAULT_CLOCK: Optional[Clock] = None  # Initialized on first use


def get_default_clock() -> Clock:
    """Get default clock, initializing if needed."""
    global _DEFAULT_CLOCK
    if _DEFAULT_CLOCK is None:
        _DEFAULT_CLOCK = SystemClock()
    return _DEFAULT_CLOCK


def set_default_clock(clock: Optional[Clock]) -> None:
    """Replace the default clock. ``None`` restores the system clock lazily."""
    global _DEFAULT_CLOCK
    _DEFAULT_CLOCK = clock


def resolve_clock(clock: Optional[Clock] = None) -> Clock:
    return clock if clock is not None else get_default_clock()
