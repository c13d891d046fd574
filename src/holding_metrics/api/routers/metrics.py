"""Window and performance metrics endpoints."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from holding_metrics.api.deps import (
    get_now,
    get_performance_service,
    get_price_service,
    get_series,
)
from holding_metrics.api.schemas import (
    CurrentPriceResponse,
    MetricsResponse,
    WindowListResponse,
    WindowPerformanceListResponse,
    WindowPerformanceResponse,
    WindowResponse,
)
from holding_metrics.config.settings import get_settings
from holding_metrics.domain.models import WINDOWS, PriceSeries
from holding_metrics.domain.views import CurrentPrice, WindowPerformance
from holding_metrics.services import (
    PerformanceService,
    PriceService,
    available_windows,
)

router = APIRouter(tags=["metrics"])


@router.get("/windows", response_model=WindowListResponse)
def list_windows(
    series: PriceSeries = Depends(get_series),
    now: datetime = Depends(get_now),
) -> WindowListResponse:
    """List every window and whether the series covers it."""
    available = set(available_windows(series, now))
    return WindowListResponse(
        windows=[
            WindowResponse(
                window_id=spec.window_id,
                label=spec.label,
                kind=spec.kind,
                available=spec.window_id in available,
            )
            for spec in WINDOWS.values()
        ]
    )


@router.get("/price", response_model=CurrentPriceResponse)
def get_current_price(
    series: PriceSeries = Depends(get_series),
    prices: PriceService = Depends(get_price_service),
) -> CurrentPriceResponse:
    """Get the current price and its source."""
    return _price_response(prices.get_current_price(series))


@router.get("/metrics", response_model=WindowPerformanceResponse)
def get_metrics(
    window: Optional[str] = Query(None, description="Window id, e.g. 1d, mtd, 1y, all"),
    amount: Optional[float] = Query(None, description="Amount of the asset held"),
    series: PriceSeries = Depends(get_series),
    prices: PriceService = Depends(get_price_service),
    performance: PerformanceService = Depends(get_performance_service),
    now: datetime = Depends(get_now),
) -> WindowPerformanceResponse:
    """Evaluate holding performance over one window."""
    settings = get_settings()
    window_id = window or settings.default_window
    amount_held = settings.default_amount if amount is None else amount

    current = prices.get_current_price(series)
    result = performance.evaluate(series, current, amount_held, window_id, now)
    return _performance_response(result, amount_held)


@router.get("/metrics/all", response_model=WindowPerformanceListResponse)
def get_all_metrics(
    amount: Optional[float] = Query(None, description="Amount of the asset held"),
    series: PriceSeries = Depends(get_series),
    prices: PriceService = Depends(get_price_service),
    performance: PerformanceService = Depends(get_performance_service),
    now: datetime = Depends(get_now),
) -> WindowPerformanceListResponse:
    """Evaluate every window the series has history for."""
    settings = get_settings()
    amount_held = settings.default_amount if amount is None else amount

    current = prices.get_current_price(series)
    results = performance.evaluate_all(series, current, amount_held, now)
    return WindowPerformanceListResponse(
        results=[_performance_response(r, amount_held) for r in results.values()],
        count=len(results),
    )


def _price_response(price: CurrentPrice) -> CurrentPriceResponse:
    return CurrentPriceResponse(value=price.value, source=price.source, as_of=price.as_of)


def _performance_response(
    result: WindowPerformance,
    amount_held: float,
) -> WindowPerformanceResponse:
    spec = result.window.spec
    metrics = result.metrics
    return WindowPerformanceResponse(
        window_id=spec.window_id,
        label=spec.label,
        kind=spec.kind,
        start_instant=result.window.start_instant,
        start_date=result.start_point.date if result.start_point else None,
        start_price=result.start_point.price if result.start_point else None,
        amount=amount_held,
        current_price=_price_response(result.current_price),
        metrics=(
            MetricsResponse(
                total_value=metrics.total_value,
                initial_value=metrics.initial_value,
                absolute_gain=metrics.absolute_gain,
                percentage_gain=metrics.percentage_gain,
                years=metrics.years,
                cagr=metrics.cagr,
                display_cagr=metrics.display_cagr,
            )
            if metrics
            else None
        ),
        has_data=result.has_data,
        is_stale_window=result.is_stale_window,
    )
