"""Enumerations for domain models."""

from enum import Enum


class WindowKind(str, Enum):
    """How a time window maps `now` to a start instant."""

    FIXED_DAYS = "FIXED_DAYS"  # now minus N wall-clock days
    CALENDAR = "CALENDAR"  # start of a calendar period
    ALL = "ALL"  # start of the series


class CalendarUnit(str, Enum):
    """Calendar periods used by calendar windows."""

    YESTERDAY = "YESTERDAY"  # start of the previous calendar day
    WEEK = "WEEK"  # Monday
    MONTH = "MONTH"
    YEAR = "YEAR"


class PriceSource(str, Enum):
    """Where a current price came from."""

    FRESH = "FRESH"
    EXPIRED_CACHE = "EXPIRED_CACHE"
    FALLBACK_HISTORICAL = "FALLBACK_HISTORICAL"
