"""Historical series endpoints."""

from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from holding_metrics.api.deps import get_now, get_series
from holding_metrics.api.schemas import (
    PricePointResponse,
    PriceRangeResponse,
    SeriesInfoResponse,
    WindowPricesResponse,
)
from holding_metrics.domain.models import PriceSeries
from holding_metrics.services import (
    latest_price,
    price_at,
    price_range,
    resolve_window,
    window_prices,
)

router = APIRouter(prefix="/series", tags=["series"])


@router.get("", response_model=SeriesInfoResponse)
def get_series_info(series: PriceSeries = Depends(get_series)) -> SeriesInfoResponse:
    """Get series bounds and the latest close."""
    latest = latest_price(series)
    return SeriesInfoResponse(
        start_date=series.start_date,
        end_date=series.end_date,
        total_days=series.total_days,
        latest=PricePointResponse(date=latest.date, price=latest.price),
    )


@router.get("/latest", response_model=PricePointResponse)
def get_latest(series: PriceSeries = Depends(get_series)) -> PricePointResponse:
    """Get the latest close."""
    latest = latest_price(series)
    return PricePointResponse(date=latest.date, price=latest.price)


@router.get("/price/{day}", response_model=PricePointResponse)
def get_price(day: date, series: PriceSeries = Depends(get_series)) -> PricePointResponse:
    """Get the close for a single day."""
    point = price_at(series, day)
    if point is None:
        raise HTTPException(status_code=404, detail=f"No close for {day.isoformat()}")
    return PricePointResponse(date=point.date, price=point.price)


@router.get("/range", response_model=PriceRangeResponse)
def get_range(
    start: date = Query(..., description="First day (YYYY-MM-DD)"),
    end: date = Query(..., description="Last day (YYYY-MM-DD)"),
    series: PriceSeries = Depends(get_series),
) -> PriceRangeResponse:
    """Get daily closes between two days, clipped to the series."""
    points = price_range(series, start, end)
    return PriceRangeResponse(
        points=[PricePointResponse(date=p.date, price=p.price) for p in points],
        count=len(points),
    )


@router.get("/window", response_model=WindowPricesResponse)
def get_window_prices(
    window: str = Query(..., description="Window id, e.g. 1d, mtd, 1y, all"),
    series: PriceSeries = Depends(get_series),
    now: datetime = Depends(get_now),
) -> WindowPricesResponse:
    """Get the daily closes a window covers, for charting."""
    resolved = resolve_window(window, now, series)
    points = window_prices(series, window, now)
    return WindowPricesResponse(
        window_id=resolved.window_id,
        start_instant=resolved.start_instant,
        points=[PricePointResponse(date=p.date, price=p.price) for p in points],
        count=len(points),
    )
