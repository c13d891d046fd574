"""Daily close-price series model."""

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class PricePoint:
    """A single daily close."""

    date: date
    price: float


@dataclass(frozen=True)
class PriceSeries:
    """
    Gapless daily close prices anchored at a start date.

    Index i holds the close of start_date + i days (UTC). Built by
    parse_series, which enforces a non-empty list of finite, non-negative
    prices; never mutated afterwards.
    """

    start_date: date
    prices: tuple[float, ...]

    @property
    def total_days(self) -> int:
        return len(self.prices)

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=len(self.prices) - 1)

    def to_raw(self) -> dict:
        """Return the persisted {start, prices} form."""
        return {
            "start": self.start_date.strftime("%Y-%m-%d"),
            "prices": list(self.prices),
        }
