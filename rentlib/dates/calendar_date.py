"""
Calendar-date normalization and arithmetic.

Every date handled by the package is reduced to a ``datetime.date`` before it
is compared, shifted or serialized, so results never depend on the process
time zone.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Union

import pandas as pd
from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from .errors import InvalidDateFormat

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, pd.Timestamp]

DATE_FMT = "%Y-%m-%d"
BR_DATE_FMT = "%d/%m/%Y"

# Full date part required; any trailing time part is ignored.
_ISO_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2}|\d{8})(.\d{2}.*)?$")
_BR_PATTERN = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")


def _parse_string(text: str) -> date:
    value = text.strip()
    if not value:
        raise InvalidDateFormat(text, "empty string")

    if _BR_PATTERN.match(value):
        try:
            return datetime.strptime(value, BR_DATE_FMT).date()
        except ValueError as exc:
            raise InvalidDateFormat(text, str(exc)) from exc

    if _ISO_PATTERN.match(value):
        try:
            # The written date is the calendar day; no time zone conversion.
            return isoparse(value).date()
        except ValueError as exc:
            raise InvalidDateFormat(text, str(exc)) from exc

    raise InvalidDateFormat(text)


def to_date(value: DateLike) -> date:
    """
    Convert a date-like value into a calendar date.

    Accepts ``date``, ``datetime`` (its own wall-clock date is kept),
    ``pandas.Timestamp`` and the string formats 'YYYY-MM-DD' (optionally with a
    time part), 'YYYYMMDD' and 'DD/MM/YYYY'.

    Raises:
        InvalidDateFormat: Value is missing or cannot be parsed
        TypeError: Value is not date-like at all
    """
    if value is None:
        raise InvalidDateFormat(value, "missing value")
    if isinstance(value, pd.Timestamp):
        if pd.isna(value):
            raise InvalidDateFormat(value, "missing value")
        return value.date()
    if value is pd.NaT:
        raise InvalidDateFormat(value, "missing value")
    # datetime subclasses date, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_string(value)
    raise TypeError(f"Unsupported type for date: {type(value)}")


def _is_blank(value) -> bool:
    if value is None or value is pd.NaT:
        return True
    return isinstance(value, str) and not value.strip()


def format_date(value: DateLike) -> str:
    """Format a date-like as 'DD/MM/YYYY'. Missing values render as ''."""
    if _is_blank(value):
        return ""
    return to_date(value).strftime(BR_DATE_FMT)


def format_date_to_iso(value: DateLike) -> str:
    """Format a date-like as 'YYYY-MM-DD'."""
    return to_date(value).strftime(DATE_FMT)


def parse_date(br_date: str) -> str:
    """Convert a 'DD/MM/YYYY' string into 'YYYY-MM-DD'. Empty input gives ''."""
    if _is_blank(br_date):
        return ""
    text = br_date.strip()
    if not _BR_PATTERN.match(text):
        raise InvalidDateFormat(br_date, "expected DD/MM/YYYY")
    return format_date_to_iso(text)


def add_months(value: DateLike, months: int) -> date:
    """
    Shift a date by whole calendar months.

    The day of month is kept when the target month has it, otherwise it is
    clamped to the last day of that month (Jan 31 + 1 month -> Feb 28/29).
    """
    start = to_date(value)
    result = start + relativedelta(months=int(months))
    if result.day != start.day:
        logger.debug("Clamped %s + %s months to %s", start, months, result)
    return result


def calculate_end_date(start_date: DateLike, duration_months: int) -> str:
    """Return the ISO end date of a contract lasting ``duration_months``."""
    return format_date_to_iso(add_months(start_date, duration_months))
