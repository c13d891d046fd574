"""Price and series providers module."""

from holding_metrics.providers.price_provider import PriceProvider
from holding_metrics.providers.stub_provider import StubPriceProvider
from holding_metrics.providers.coingecko_provider import CoinGeckoPriceProvider
from holding_metrics.providers.series_loader import load_series, dump_series

__all__ = [
    "PriceProvider",
    "StubPriceProvider",
    "CoinGeckoPriceProvider",
    "load_series",
    "dump_series",
]
