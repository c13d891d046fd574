"""Pydantic schemas for window and metrics endpoints."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from holding_metrics.domain.models import PriceSource, WindowKind


class WindowResponse(BaseModel):
    """Response schema for a window definition."""

    window_id: str
    label: str
    kind: WindowKind
    available: bool


class WindowListResponse(BaseModel):
    """Response schema for window listing."""

    windows: list[WindowResponse]


class CurrentPriceResponse(BaseModel):
    """Response schema for the current price and where it came from."""

    value: float
    source: PriceSource
    as_of: datetime


class MetricsResponse(BaseModel):
    """Response schema for computed metrics."""

    total_value: float
    initial_value: float
    absolute_gain: float
    percentage_gain: float
    years: float
    cagr: float
    display_cagr: Optional[float] = None


class WindowPerformanceResponse(BaseModel):
    """Response schema for one evaluated window."""

    window_id: str
    label: str
    kind: WindowKind
    start_instant: datetime
    start_date: Optional[date] = None
    start_price: Optional[float] = None
    amount: float
    current_price: CurrentPriceResponse
    metrics: Optional[MetricsResponse] = None
    has_data: bool
    is_stale_window: bool


class WindowPerformanceListResponse(BaseModel):
    """Response schema for every available window."""

    results: list[WindowPerformanceResponse]
    count: int
