"""
Metrics engine.

Pure arithmetic over already-resolved inputs:

    total_value     = amount_held * current_price
    initial_value   = amount_held * start_price
    absolute_gain   = total_value - initial_value
    percentage_gain = (current_price - start_price) / start_price
    years           = (now - start_instant) / 365.25 days
    cagr            = (current_price / start_price) ** (1 / years) - 1

Sub-year CAGR is an extrapolation and can be enormous (2% over 1.5 days
annualizes to roughly 12,300%). It is always computed; display_cagr is
the value presentation layers should show, and it is None for periods
shorter than 30 days.
"""

import math
from datetime import datetime, timedelta
from numbers import Real
from typing import Any, Optional

from holding_metrics.core.dates import to_utc
from holding_metrics.core.exceptions import (
    InvalidAmountError,
    InvalidPeriodError,
    InvalidPriceError,
)
from holding_metrics.domain.views import PortfolioMetrics

DAYS_PER_YEAR = 365.25
MIN_DAYS_FOR_DISPLAY_CAGR = 30
MIN_YEARS_FOR_DISPLAY_CAGR = MIN_DAYS_FOR_DISPLAY_CAGR / DAYS_PER_YEAR

_YEAR = timedelta(days=DAYS_PER_YEAR)


def years_between(start: datetime, end: datetime) -> float:
    """Years from start to end using 365.25-day years. Requires start < end."""
    start = to_utc(start)
    end = to_utc(end)
    if end <= start:
        raise InvalidPeriodError(start.isoformat(), end.isoformat())
    return (end - start) / _YEAR


def cagr(current_price: float, start_price: float, years: float) -> float:
    """
    Compound annual growth rate implied by a price move over `years`.

    Gains over a few minutes exceed the float range once annualized; those
    come back as inf rather than raising.
    """
    try:
        return (current_price / start_price) ** (1 / years) - 1
    except OverflowError:
        return math.inf


def display_cagr(cagr_value: float, years: float) -> Optional[float]:
    """Return cagr_value when the period is long enough to show it, else None."""
    if years < MIN_YEARS_FOR_DISPLAY_CAGR:
        return None
    return cagr_value


def compute_metrics(
    amount_held: float,
    current_price: float,
    start_price: float,
    start_instant: datetime,
    now: datetime,
) -> PortfolioMetrics:
    """
    Compute value, gains and CAGR for a holding.

    Raises:
        InvalidAmountError: amount_held is negative or not a number
        InvalidPriceError: current_price < 0 or start_price <= 0
        InvalidPeriodError: now is not strictly after start_instant
    """
    if not _is_number(amount_held) or amount_held < 0:
        raise InvalidAmountError(amount_held)
    if not _is_number(current_price) or current_price < 0:
        raise InvalidPriceError(
            f"Current price must be a non-negative number, got {current_price!r}"
        )
    if not _is_number(start_price) or start_price <= 0:
        raise InvalidPriceError(
            f"Start price must be a positive number, got {start_price!r}"
        )

    years = years_between(start_instant, now)

    total_value = amount_held * current_price
    initial_value = amount_held * start_price
    growth = cagr(current_price, start_price, years)

    return PortfolioMetrics(
        total_value=total_value,
        initial_value=initial_value,
        absolute_gain=total_value - initial_value,
        percentage_gain=(current_price - start_price) / start_price,
        years=years,
        cagr=growth,
        display_cagr=display_cagr(growth, years),
    )


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )
