"""Price cache repository protocol."""

from typing import Protocol, Optional

from holding_metrics.domain.models import PriceCacheEntry


class PriceCacheRepository(Protocol):
    """Interface for spot price cache access."""

    def get(self, asset: str) -> Optional[PriceCacheEntry]:
        """Get the cached price for an asset, expired or not."""
        ...

    def upsert(self, entry: PriceCacheEntry) -> PriceCacheEntry:
        """Insert or replace the cached price for an asset."""
        ...

    def delete(self, asset: str) -> None:
        """Drop the cached price for an asset."""
        ...
