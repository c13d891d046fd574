"""Pydantic schemas for series endpoints."""

from datetime import date, datetime

from pydantic import BaseModel


class PricePointResponse(BaseModel):
    """Response schema for a single daily close."""

    date: date
    price: float


class SeriesInfoResponse(BaseModel):
    """Response schema for series bounds."""

    start_date: date
    end_date: date
    total_days: int
    latest: PricePointResponse


class PriceRangeResponse(BaseModel):
    """Response schema for a range of daily closes."""

    points: list[PricePointResponse]
    count: int


class WindowPricesResponse(BaseModel):
    """Response schema for the closes covered by a window."""

    window_id: str
    start_instant: datetime
    points: list[PricePointResponse]
    count: int
