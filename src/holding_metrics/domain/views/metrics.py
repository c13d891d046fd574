"""View models for metric computations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from holding_metrics.domain.models import PricePoint, PriceSource, ResolvedWindow


@dataclass(frozen=True)
class CurrentPrice:
    """A spot price tagged with where it came from."""

    value: float
    source: PriceSource
    as_of: datetime

    @property
    def is_historical_fallback(self) -> bool:
        return self.source is PriceSource.FALLBACK_HISTORICAL


@dataclass(frozen=True)
class PortfolioMetrics:
    """Performance of a holding between a start instant and now."""

    total_value: float
    initial_value: float
    absolute_gain: float
    percentage_gain: float
    years: float
    cagr: float
    display_cagr: Optional[float] = None


@dataclass(frozen=True)
class WindowPerformance:
    """
    Result of evaluating one window.

    metrics is None when the series has no close for the window's start day.
    is_stale_window marks a flat result produced by comparing the latest
    close against itself.
    """

    window: ResolvedWindow
    current_price: CurrentPrice
    start_point: Optional[PricePoint] = None
    metrics: Optional[PortfolioMetrics] = None
    is_stale_window: bool = False

    @property
    def has_data(self) -> bool:
        return self.metrics is not None
