"""Domain models package."""

from holding_metrics.domain.models.enums import WindowKind, CalendarUnit, PriceSource
from holding_metrics.domain.models.series import PricePoint, PriceSeries
from holding_metrics.domain.models.window import WindowSpec, ResolvedWindow, WINDOWS
from holding_metrics.domain.models.cache import PriceCacheEntry

__all__ = [
    "WindowKind",
    "CalendarUnit",
    "PriceSource",
    "PricePoint",
    "PriceSeries",
    "WindowSpec",
    "ResolvedWindow",
    "WINDOWS",
    "PriceCacheEntry",
]
