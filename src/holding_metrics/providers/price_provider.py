"""Spot price provider protocol."""

from typing import Protocol


class PriceProvider(Protocol):
    """
    Protocol for live spot price providers.

    Implementations raise on any failure (network, HTTP status, payload
    shape); PriceService owns caching and fallback.
    """

    def fetch_price(self) -> float:
        """Fetch the current spot price of the tracked asset."""
        ...
