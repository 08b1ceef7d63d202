"""Calendar-date normalization, formatting and arithmetic."""

from .calendar_date import (
    BR_DATE_FMT,
    DATE_FMT,
    DateLike,
    add_months,
    calculate_end_date,
    format_date,
    format_date_to_iso,
    parse_date,
    to_date,
)
from .clock import (
    DEFAULT_TIMEZONE,
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    resolve_clock,
    set_default_clock,
)
from .errors import InvalidDateFormat

__all__ = [
    "DATE_FMT",
    "BR_DATE_FMT",
    "DEFAULT_TIMEZONE",
    "DateLike",
    "InvalidDateFormat",
    "to_date",
    "format_date",
    "format_date_to_iso",
    "parse_date",
    "add_months",
    "calculate_end_date",
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_default_clock",
    "set_default_clock",
    "resolve_clock",
]
