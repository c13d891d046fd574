"""
Unit tests for the metrics engine.

Tests cover:
- Value, gain and percentage formulas
- 365.25-day year convention
- CAGR, including extrapolated sub-year figures
- The 30-day display gate for CAGR
- Precondition errors
"""

import math
from datetime import datetime, timedelta

import pytest

from holding_metrics.core.exceptions import (
    InvalidAmountError,
    InvalidPeriodError,
    InvalidPriceError,
)
from holding_metrics.services import (
    DAYS_PER_YEAR,
    MIN_YEARS_FOR_DISPLAY_CAGR,
    cagr,
    compute_metrics,
    display_cagr,
    years_between,
)

from tests.conftest import utc_datetime


NOW = utc_datetime(2024, 12, 16, 12, 0)


def days_before(days: float) -> datetime:
    return NOW - timedelta(days=days)


# =============================================================================
# FORMULA TESTS
# =============================================================================


class TestComputeMetrics:
    """Tests for the metric formulas."""

    def test_basic_metrics(self):
        """
        GIVEN 2 units bought at 100 a year ago, now worth 150 each
        WHEN I compute metrics
        THEN value, gains and CAGR follow the formulas
        """
        metrics = compute_metrics(2, 150, 100, days_before(DAYS_PER_YEAR), NOW)

        assert metrics.total_value == 300
        assert metrics.initial_value == 200
        assert metrics.absolute_gain == 100
        assert metrics.percentage_gain == 0.5
        assert metrics.years == pytest.approx(1.0)
        assert metrics.cagr == pytest.approx(0.5)
        assert metrics.display_cagr == metrics.cagr

    def test_two_year_cagr(self):
        metrics = compute_metrics(1, 121, 100, days_before(2 * DAYS_PER_YEAR), NOW)

        assert metrics.years == pytest.approx(2.0)
        assert metrics.cagr == pytest.approx(0.1)

    def test_zero_amount_gives_zero_value_but_real_returns(self):
        metrics = compute_metrics(0, 120, 100, days_before(60), NOW)

        assert metrics.total_value == 0
        assert metrics.absolute_gain == 0
        assert metrics.percentage_gain == pytest.approx(0.2)

    def test_zero_current_price_is_total_loss(self):
        metrics = compute_metrics(1, 0, 100, days_before(400), NOW)

        assert metrics.percentage_gain == -1.0
        assert metrics.cagr == -1.0

    def test_naive_datetimes_treated_as_utc(self):
        start = datetime(2023, 12, 16, 12, 0)
        metrics = compute_metrics(1, 110, 100, start, NOW)

        assert metrics.years == pytest.approx(366 / DAYS_PER_YEAR)


class TestGainSigns:
    """Gain sign must follow the price move."""

    @pytest.mark.parametrize("amount", [0.5, 1, 3.25])
    @pytest.mark.parametrize("current,start", [(45000, 50000), (1, 2), (99.99, 100)])
    def test_loss_is_negative(self, amount, current, start):
        metrics = compute_metrics(amount, current, start, days_before(2), NOW)

        assert metrics.absolute_gain < 0
        assert metrics.percentage_gain < 0

    @pytest.mark.parametrize("amount", [0.5, 1, 3.25])
    @pytest.mark.parametrize("current,start", [(51000, 50000), (2, 1), (100.01, 100)])
    def test_gain_is_positive(self, amount, current, start):
        metrics = compute_metrics(amount, current, start, days_before(2), NOW)

        assert metrics.absolute_gain > 0
        assert metrics.percentage_gain > 0

    @pytest.mark.parametrize("price", [0.01, 50000, 123456.78])
    def test_flat_is_zero(self, price):
        metrics = compute_metrics(1.5, price, price, days_before(2), NOW)

        assert metrics.absolute_gain == 0
        assert metrics.percentage_gain == 0
        assert metrics.cagr == 0


# =============================================================================
# END-TO-END METRIC TESTS
# =============================================================================


class TestComputeMetricsExamples:
    """Worked examples of compute_metrics."""

    def test_one_day_loss_from_yesterdays_close(self):
        """1 unit, 50000 at 2024-12-15 00:00 -> 45000 at 2024-12-16 12:00."""
        metrics = compute_metrics(1, 45000, 50000, utc_datetime(2024, 12, 15), NOW)

        assert metrics.absolute_gain == -5000
        assert metrics.percentage_gain == pytest.approx(-0.10)
        assert metrics.years == pytest.approx(1.5 / DAYS_PER_YEAR)

    def test_short_period_gain_extrapolates(self):
        """
        GIVEN a 2% gain over 1.5 days
        WHEN I compute metrics
        THEN CAGR is a huge extrapolation and display_cagr is withheld
        """
        metrics = compute_metrics(1, 51000, 50000, days_before(1.5), NOW)

        assert metrics.percentage_gain == pytest.approx(0.02)
        assert metrics.cagr == pytest.approx(123, rel=0.01)
        assert metrics.cagr == pytest.approx(1.02 ** (DAYS_PER_YEAR / 1.5) - 1)
        assert metrics.display_cagr is None

    def test_45_day_period_shows_cagr(self):
        metrics = compute_metrics(1, 51000, 50000, days_before(45), NOW)

        assert metrics.display_cagr is not None
        assert metrics.display_cagr == metrics.cagr

    def test_minutes_long_period_overflows_to_inf(self):
        metrics = compute_metrics(1, 51000, 50000, NOW - timedelta(minutes=1), NOW)

        assert metrics.cagr == math.inf
        assert metrics.display_cagr is None

    def test_minutes_long_loss_floors_at_minus_one(self):
        metrics = compute_metrics(1, 49000, 50000, NOW - timedelta(minutes=1), NOW)

        assert metrics.cagr == pytest.approx(-1.0)


# =============================================================================
# DISPLAY GATE TESTS
# =============================================================================


class TestDisplayCagrGate:
    """display_cagr is None iff years < 30 / 365.25."""

    def test_threshold_constant(self):
        assert MIN_YEARS_FOR_DISPLAY_CAGR == 30 / 365.25

    @pytest.mark.parametrize("days", [0.01, 1, 7, 29, 29.999])
    def test_below_threshold_hidden(self, days):
        metrics = compute_metrics(1, 110, 100, days_before(days), NOW)

        assert metrics.years < MIN_YEARS_FOR_DISPLAY_CAGR
        assert metrics.display_cagr is None

    @pytest.mark.parametrize("days", [30, 30.5, 45, 365, 3000])
    def test_at_or_above_threshold_shown_identically(self, days):
        metrics = compute_metrics(1, 110, 100, days_before(days), NOW)

        assert metrics.years >= MIN_YEARS_FOR_DISPLAY_CAGR
        assert metrics.display_cagr is metrics.cagr

    def test_exactly_thirty_days(self):
        years = years_between(days_before(30), NOW)

        assert years == MIN_YEARS_FOR_DISPLAY_CAGR
        assert display_cagr(0.25, years) == 0.25

    def test_display_cagr_returns_same_value(self):
        value = cagr(110, 100, 0.5)

        assert display_cagr(value, 0.5) is value


# =============================================================================
# PRECONDITION TESTS
# =============================================================================


class TestPreconditions:
    """Each invalid input raises its own error."""

    @pytest.mark.parametrize("amount", [-0.0001, -1, float("nan"), "1", None, True])
    def test_invalid_amount(self, amount):
        with pytest.raises(InvalidAmountError):
            compute_metrics(amount, 100, 100, days_before(10), NOW)

    @pytest.mark.parametrize("current", [-1, float("nan"), float("inf"), "100", None])
    def test_invalid_current_price(self, current):
        with pytest.raises(InvalidPriceError):
            compute_metrics(1, current, 100, days_before(10), NOW)

    @pytest.mark.parametrize("start", [0, 0.0, -5, float("nan"), None])
    def test_invalid_start_price(self, start):
        """A zero start price would divide by zero; it must be rejected."""
        with pytest.raises(InvalidPriceError):
            compute_metrics(1, 100, start, days_before(10), NOW)

    def test_start_equal_to_now_rejected(self):
        with pytest.raises(InvalidPeriodError):
            compute_metrics(1, 100, 100, NOW, NOW)

    def test_start_after_now_rejected(self):
        with pytest.raises(InvalidPeriodError):
            compute_metrics(1, 100, 100, NOW + timedelta(seconds=1), NOW)

    def test_amount_checked_before_prices(self):
        with pytest.raises(InvalidAmountError):
            compute_metrics(-1, -1, 0, NOW, NOW)

    def test_years_between_rejects_reversed(self):
        with pytest.raises(InvalidPeriodError):
            years_between(NOW, days_before(1))

    def test_error_codes(self):
        with pytest.raises(InvalidPriceError) as exc_info:
            compute_metrics(1, 100, 0, days_before(1), NOW)

        assert exc_info.value.code == "INVALID_PRICE"
