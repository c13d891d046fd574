"""Pydantic schemas for API request/response."""

from holding_metrics.api.schemas.series import (
    PricePointResponse,
    SeriesInfoResponse,
    PriceRangeResponse,
    WindowPricesResponse,
)
from holding_metrics.api.schemas.metrics import (
    WindowResponse,
    WindowListResponse,
    CurrentPriceResponse,
    MetricsResponse,
    WindowPerformanceResponse,
    WindowPerformanceListResponse,
)

__all__ = [
    "PricePointResponse",
    "SeriesInfoResponse",
    "PriceRangeResponse",
    "WindowPricesResponse",
    "WindowResponse",
    "WindowListResponse",
    "CurrentPriceResponse",
    "MetricsResponse",
    "WindowPerformanceResponse",
    "WindowPerformanceListResponse",
]
