"""Repository layer - data access abstractions."""

from holding_metrics.repositories.protocols import PriceCacheRepository

__all__ = [
    "PriceCacheRepository",
]
