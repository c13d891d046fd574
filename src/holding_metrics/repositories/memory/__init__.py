"""In-memory repository implementations."""

from holding_metrics.repositories.memory.price_cache_repo import InMemoryPriceCacheRepository

__all__ = [
    "InMemoryPriceCacheRepository",
]
