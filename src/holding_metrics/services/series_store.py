"""
Historical series store.

Parses the persisted {start, prices} form into a PriceSeries and answers
point, latest and range lookups against it. All offsets are whole UTC days
computed by core.dates.day_offset.
"""

import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

from holding_metrics.core.dates import (
    DayLike,
    add_days,
    day_offset,
    format_date,
    parse_calendar_date,
    utc_day,
)
from holding_metrics.core.exceptions import InvalidRangeError, ValidationError
from holding_metrics.domain.models import PricePoint, PriceSeries

logger = logging.getLogger(__name__)


def parse_series(raw: Any) -> PriceSeries:
    """
    Validate raw series input and build a PriceSeries.

    Zero prices are accepted (history before a market existed); negative,
    NaN, infinite and non-numeric values are rejected.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("Invalid historical data: must be an object")

    start = raw.get("start")
    if not start or not isinstance(start, str):
        raise ValidationError("Invalid historical data: missing or invalid start date")
    start_date = parse_calendar_date(start)

    prices = raw.get("prices")
    if not isinstance(prices, list):
        raise ValidationError("Invalid historical data: prices must be an array")
    if not prices:
        raise ValidationError("Invalid historical data: prices array is empty")

    invalid = [
        index for index, price in enumerate(prices) if not _is_valid_price(price)
    ]
    if invalid:
        raise ValidationError(
            f"Invalid historical data: found {len(invalid)} invalid prices "
            f"(first at index {invalid[0]})"
        )

    series = PriceSeries(
        start_date=start_date,
        prices=tuple(float(p) for p in prices),
    )
    logger.debug(
        "Parsed price series: %d days from %s to %s",
        series.total_days,
        format_date(series.start_date),
        format_date(series.end_date),
    )
    return series


def price_at(series: PriceSeries, target: DayLike) -> Optional[PricePoint]:
    """
    Return the close for target's UTC day, or None when outside the series.

    Out-of-range lookups are expected for short or stale series and are not
    an error.
    """
    day = utc_day(target)
    offset = day_offset(series.start_date, day)
    if offset < 0 or offset >= series.total_days:
        return None
    return PricePoint(date=day, price=series.prices[offset])


def latest_price(series: PriceSeries) -> PricePoint:
    """Return the last close in the series."""
    return PricePoint(date=series.end_date, price=series.prices[-1])


def price_range(
    series: PriceSeries,
    start: DayLike,
    end: DayLike,
) -> list[PricePoint]:
    """
    Return daily closes from start to end inclusive, clipped to the series.

    An empty list means the requested range does not overlap the series.
    """
    start_day = utc_day(start)
    end_day = utc_day(end)
    if start_day > end_day:
        raise InvalidRangeError(format_date(start_day), format_date(end_day))

    first = max(0, day_offset(series.start_date, start_day))
    last = min(series.total_days - 1, day_offset(series.start_date, end_day))

    return [
        PricePoint(date=add_days(series.start_date, i), price=series.prices[i])
        for i in range(first, last + 1)
    ]


def _is_valid_price(value: Any) -> bool:
    # bool is an int subclass but never a price
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value >= 0
