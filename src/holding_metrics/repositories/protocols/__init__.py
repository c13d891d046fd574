"""Repository protocol definitions (interfaces)."""

from holding_metrics.repositories.protocols.price_cache_repo import PriceCacheRepository

__all__ = [
    "PriceCacheRepository",
]
