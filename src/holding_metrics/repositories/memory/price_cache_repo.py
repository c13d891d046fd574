"""In-memory implementation of PriceCacheRepository."""

from dataclasses import replace
from typing import Optional

from holding_metrics.domain.models import PriceCacheEntry


class InMemoryPriceCacheRepository:
    """Process-local price cache, lost on restart."""

    def __init__(self):
        self._entries: dict[str, PriceCacheEntry] = {}

    def get(self, asset: str) -> Optional[PriceCacheEntry]:
        entry = self._entries.get(asset)
        return replace(entry) if entry else None

    def upsert(self, entry: PriceCacheEntry) -> PriceCacheEntry:
        self._entries[entry.asset] = replace(entry)
        return entry

    def delete(self, asset: str) -> None:
        self._entries.pop(asset, None)
