"""Performance service: window resolution, lookup and metrics in one call."""

import logging
from datetime import datetime
from typing import Optional

from holding_metrics.core.dates import format_date, start_of_day, to_utc
from holding_metrics.domain.models import PricePoint, PriceSeries
from holding_metrics.domain.views import CurrentPrice, WindowPerformance
from holding_metrics.services.metrics_engine import compute_metrics
from holding_metrics.services.series_store import latest_price, price_at
from holding_metrics.services.window_resolver import (
    available_windows,
    resolve_window,
)

logger = logging.getLogger(__name__)


def is_stale_window(
    series: PriceSeries,
    start_point: Optional[PricePoint],
    current_price: CurrentPrice,
) -> bool:
    """
    Flag a window whose start close is the very close used as "current".

    This happens when the live price was unavailable and the latest close
    stood in for it while the window starts on that same day: the result is
    flat by construction and says nothing about the market.
    """
    if start_point is None or not current_price.is_historical_fallback:
        return False
    return start_point.date == latest_price(series).date


class PerformanceService:
    """
    Service for evaluating holding performance over named windows.

    Stateless: the series, current price and `now` are passed on every call.
    """

    def evaluate(
        self,
        series: PriceSeries,
        current_price: CurrentPrice,
        amount_held: float,
        window_id: str,
        now: datetime,
    ) -> WindowPerformance:
        """
        Evaluate one window.

        Returns a WindowPerformance without metrics when the series has no
        usable close for the window's start day (absent, or zero before the
        market existed) or when the period has not started yet, as at
        00:00 UTC on a period boundary. No substitute price is used.
        Metrics are measured from 00:00 UTC of the start close's day.
        """
        now = to_utc(now)
        window = resolve_window(window_id, now, series)
        start_point = price_at(series, window.start_instant)

        if start_point is None:
            logger.info(
                "Insufficient data for window %s: no close on %s (series %s to %s)",
                window_id,
                format_date(window.start_instant.date()),
                format_date(series.start_date),
                format_date(series.end_date),
            )
            return WindowPerformance(window=window, current_price=current_price)

        if start_point.price == 0:
            logger.info(
                "Insufficient data for window %s: close on %s is zero",
                window_id,
                format_date(start_point.date),
            )
            return WindowPerformance(
                window=window, current_price=current_price, start_point=start_point
            )

        measured_from = start_of_day(start_point.date)
        if measured_from >= now:
            logger.info(
                "Window %s has an empty period: starts %s, now is %s",
                window_id,
                measured_from.isoformat(),
                now.isoformat(),
            )
            return WindowPerformance(
                window=window, current_price=current_price, start_point=start_point
            )

        metrics = compute_metrics(
            amount_held=amount_held,
            current_price=current_price.value,
            start_price=start_point.price,
            start_instant=measured_from,
            now=now,
        )
        stale = is_stale_window(series, start_point, current_price)
        if stale:
            logger.warning(
                "Window %s starts on the latest close (%s) and the current price "
                "is that same close; result is not fresh",
                window_id,
                format_date(start_point.date),
            )

        return WindowPerformance(
            window=window,
            current_price=current_price,
            start_point=start_point,
            metrics=metrics,
            is_stale_window=stale,
        )

    def evaluate_all(
        self,
        series: PriceSeries,
        current_price: CurrentPrice,
        amount_held: float,
        now: datetime,
    ) -> dict[str, WindowPerformance]:
        """Evaluate every window the series has history for, in display order."""
        return {
            window_id: self.evaluate(series, current_price, amount_held, window_id, now)
            for window_id in available_windows(series, now)
        }
