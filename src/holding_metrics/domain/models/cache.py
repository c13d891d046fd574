"""Cache model for fetched spot prices."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class PriceCacheEntry:
    """
    Last spot price fetched for an asset.

    Kept past its TTL so it can stand in when the provider is down.
    """

    asset: str
    price: float
    fetched_at: datetime
