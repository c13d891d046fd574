"""
Window resolver.

Maps a window id and a reference instant to a concrete UTC start instant.
Calendar periods use the UTC calendar of `now`, the same day boundaries the
series store uses, so a resolved start always lands on the intended close.
"""

from datetime import datetime, timedelta
from typing import Any, Optional

from holding_metrics.core.dates import start_of_day, to_utc, utc_day
from holding_metrics.core.exceptions import UnknownWindowError, ValidationError
from holding_metrics.domain.models import (
    WINDOWS,
    CalendarUnit,
    PricePoint,
    PriceSeries,
    ResolvedWindow,
    WindowKind,
    WindowSpec,
)
from holding_metrics.services.series_store import price_range


def is_valid_window(window_id: Any) -> bool:
    """Check whether window_id names a known window."""
    return isinstance(window_id, str) and window_id in WINDOWS


def get_window(window_id: Any) -> WindowSpec:
    """Look up a window definition by id."""
    if not is_valid_window(window_id):
        raise UnknownWindowError(window_id, list(WINDOWS))
    return WINDOWS[window_id]


def resolve_window(
    window_id: str,
    now: datetime,
    series: Optional[PriceSeries] = None,
) -> ResolvedWindow:
    """
    Resolve a window to its start instant.

    - fixed-day windows: now minus N days of wall-clock time
    - 1d: 00:00 UTC of the day before now's day (not now - 24h)
    - wtd / mtd / ytd: 00:00 UTC on Monday / the 1st / Jan 1 of now's period
    - all: 00:00 UTC of the series start date (series is required)

    Because 1d anchors on yesterday's midnight, the period it measures runs
    from just over 24 hours to just under 48 hours depending on the time of
    day. This approximates "since yesterday's close".
    """
    spec = get_window(window_id)
    now = to_utc(now)

    if spec.kind is WindowKind.ALL:
        if series is None:
            raise ValidationError("The 'all' window needs a price series to resolve")
        start = start_of_day(series.start_date)
    elif spec.kind is WindowKind.FIXED_DAYS:
        start = now - timedelta(days=spec.days)
    else:
        start = _calendar_start(spec.unit, now)

    return ResolvedWindow(spec=spec, start_instant=start)


def available_windows(series: PriceSeries, now: datetime) -> list[str]:
    """
    List the window ids the series has history for, in display order.

    A window is available when its resolved start day is not before the
    first close. `all` is always available.
    """
    result = []
    for window_id in WINDOWS:
        resolved = resolve_window(window_id, now, series)
        if utc_day(resolved.start_instant) >= series.start_date:
            result.append(window_id)
    return result


def window_prices(
    series: PriceSeries,
    window_id: str,
    now: datetime,
) -> list[PricePoint]:
    """Closes from the window's start day through now's day."""
    resolved = resolve_window(window_id, now, series)
    start_day = utc_day(resolved.start_instant)
    end_day = utc_day(now)
    if start_day > end_day:
        return []
    return price_range(series, start_day, end_day)


def _calendar_start(unit: CalendarUnit, now: datetime) -> datetime:
    today = start_of_day(now)
    if unit is CalendarUnit.YESTERDAY:
        return today - timedelta(days=1)
    if unit is CalendarUnit.WEEK:
        # weekday(): Monday == 0
        return today - timedelta(days=today.weekday())
    if unit is CalendarUnit.MONTH:
        return today.replace(day=1)
    if unit is CalendarUnit.YEAR:
        return today.replace(month=1, day=1)
    raise ValueError(f"Unhandled calendar unit: {unit}")
