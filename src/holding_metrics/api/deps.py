"""Dependency injection for FastAPI."""

from datetime import datetime
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from holding_metrics.config.settings import get_settings
from holding_metrics.core.dates import now_utc
from holding_metrics.domain.models import PriceSeries
from holding_metrics.providers import (
    CoinGeckoPriceProvider,
    PriceProvider,
    StubPriceProvider,
    load_series,
)
from holding_metrics.repositories.sqlalchemy import SqlAlchemyPriceCacheRepository, get_db
from holding_metrics.services import PerformanceService, PriceService


@lru_cache(maxsize=1)
def get_series() -> PriceSeries:
    """Provide the price series, loaded once per process."""
    return load_series(get_settings().series_path)


def get_now() -> datetime:
    """Provide the reference instant for a request."""
    return now_utc()


def get_price_provider() -> PriceProvider:
    """Provide the live price provider (stub when configured offline)."""
    settings = get_settings()
    if settings.use_stub_provider:
        return StubPriceProvider()
    return CoinGeckoPriceProvider(
        url=settings.price_api_url,
        asset=settings.asset,
        quote_currency=settings.quote_currency,
        timeout_seconds=settings.price_api_timeout_seconds,
    )


def get_price_cache_repo(db: Session = Depends(get_db)) -> SqlAlchemyPriceCacheRepository:
    """Provide PriceCacheRepository instance."""
    return SqlAlchemyPriceCacheRepository(db)


def get_price_service(
    provider: PriceProvider = Depends(get_price_provider),
    cache_repo: SqlAlchemyPriceCacheRepository = Depends(get_price_cache_repo),
) -> PriceService:
    """Provide PriceService instance."""
    settings = get_settings()
    return PriceService(
        provider=provider,
        cache_repo=cache_repo,
        asset=settings.asset,
        cache_ttl_seconds=settings.price_cache_ttl_seconds,
    )


def get_performance_service() -> PerformanceService:
    """Provide PerformanceService instance."""
    return PerformanceService()
