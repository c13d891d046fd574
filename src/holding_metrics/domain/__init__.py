"""Domain layer - pure models with no external dependencies."""

from holding_metrics.domain.models import (
    WindowKind,
    CalendarUnit,
    PriceSource,
    PricePoint,
    PriceSeries,
    WindowSpec,
    ResolvedWindow,
    WINDOWS,
    PriceCacheEntry,
)

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
