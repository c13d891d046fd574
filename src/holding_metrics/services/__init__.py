"""Service layer - series lookups, window resolution and metrics."""

from holding_metrics.services.series_store import (
    parse_series,
    price_at,
    latest_price,
    price_range,
)
from holding_metrics.services.window_resolver import (
    is_valid_window,
    get_window,
    resolve_window,
    available_windows,
    window_prices,
)
from holding_metrics.services.metrics_engine import (
    DAYS_PER_YEAR,
    MIN_YEARS_FOR_DISPLAY_CAGR,
    years_between,
    cagr,
    display_cagr,
    compute_metrics,
)
from holding_metrics.services.performance_service import (
    PerformanceService,
    is_stale_window,
)
from holding_metrics.services.price_service import PriceService

__all__ = [
    "parse_series",
    "price_at",
    "latest_price",
    "price_range",
    "is_valid_window",
    "get_window",
    "resolve_window",
    "available_windows",
    "window_prices",
    "DAYS_PER_YEAR",
    "MIN_YEARS_FOR_DISPLAY_CAGR",
    "years_between",
    "cagr",
    "display_cagr",
    "compute_metrics",
    "PerformanceService",
    "is_stale_window",
    "PriceService",
]
