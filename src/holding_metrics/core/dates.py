"""
UTC calendar-day utilities.

Every date computation in the package goes through this module. Day
boundaries are 00:00 UTC; a naive datetime is taken to already be UTC.
"""

import re
from datetime import date, datetime, timedelta
from typing import Union

import pytz
from dateutil import parser as date_parser

from holding_metrics.core.exceptions import ValidationError

UTC = pytz.UTC

DayLike = Union[date, datetime, str]

_CALENDAR_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_utc() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def parse_datetime_utc(value: str) -> datetime:
    """
    Parse a datetime string and return it in UTC.

    A bare calendar date parses to 00:00 UTC of that day. Strings without an
    offset are assumed to be UTC.
    """
    try:
        dt = date_parser.isoparse(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid datetime: {value!r}") from e
    return to_utc(dt)


def parse_calendar_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD string into a date."""
    if not isinstance(value, str) or not _CALENDAR_DATE_RE.match(value):
        raise ValidationError(f"Invalid date format: {value!r} (expected YYYY-MM-DD)")
    try:
        return date_parser.isoparse(value).date()
    except ValueError as e:
        raise ValidationError(f"Invalid date format: {value!r} ({e})") from e


def format_date(day: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return day.strftime("%Y-%m-%d")


def utc_day(value: DayLike) -> date:
    """
    Reduce a date, datetime or YYYY-MM-DD string to its UTC calendar day.

    The time-of-day component of a datetime is dropped after conversion to
    UTC, so 2024-12-16T01:00+02:00 belongs to 2024-12-15.
    """
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return to_utc(value).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_calendar_date(value)
    raise ValidationError(
        f"Expected a date, datetime or YYYY-MM-DD string, got {type(value).__name__}"
    )


def start_of_day(value: DayLike) -> datetime:
    """Return 00:00 UTC of the day containing value."""
    day = utc_day(value)
    return datetime(day.year, day.month, day.day, tzinfo=UTC)


def day_offset(start: DayLike, target: DayLike) -> int:
    """Whole UTC days from start to target (negative when target is earlier)."""
    return (utc_day(target) - utc_day(start)).days


def add_days(value: DayLike, days: int) -> date:
    """Return the UTC day that is `days` after value."""
    return utc_day(value) + timedelta(days=days)
