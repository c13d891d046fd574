"""Core utilities and shared functionality."""

from holding_metrics.core.dates import (
    UTC,
    now_utc,
    to_utc,
    parse_datetime_utc,
    parse_calendar_date,
    format_date,
    utc_day,
    start_of_day,
    day_offset,
    add_days,
)
from holding_metrics.core.exceptions import (
    AppError,
    ValidationError,
    InvalidRangeError,
    UnknownWindowError,
    InvalidAmountError,
    InvalidPriceError,
    InvalidPeriodError,
    SeriesLoadError,
    PriceUnavailableError,
)

__all__ = [
    "UTC",
    "now_utc",
    "to_utc",
    "parse_datetime_utc",
    "parse_calendar_date",
    "format_date",
    "utc_day",
    "start_of_day",
    "day_offset",
    "add_days",
    "AppError",
    "ValidationError",
    "InvalidRangeError",
    "UnknownWindowError",
    "InvalidAmountError",
    "InvalidPriceError",
    "InvalidPeriodError",
    "SeriesLoadError",
    "PriceUnavailableError",
]
