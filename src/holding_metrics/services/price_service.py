"""Current price service with caching and fallback."""

import logging
import math
from datetime import datetime
from typing import Callable, Optional

from holding_metrics.core.dates import now_utc, start_of_day, to_utc
from holding_metrics.core.exceptions import PriceUnavailableError
from holding_metrics.domain.models import PriceCacheEntry, PriceSeries, PriceSource
from holding_metrics.domain.views import CurrentPrice
from holding_metrics.providers.price_provider import PriceProvider
from holding_metrics.repositories.protocols import PriceCacheRepository
from holding_metrics.services.series_store import latest_price

logger = logging.getLogger(__name__)


class PriceService:
    """
    Service for producing the current price of the tracked asset.

    Resolution order:
    1. cached price younger than the TTL (FRESH)
    2. live provider, result cached (FRESH)
    3. expired cached price (EXPIRED_CACHE)
    4. latest close of the series, when given (FALLBACK_HISTORICAL)
    """

    def __init__(
        self,
        provider: PriceProvider,
        cache_repo: PriceCacheRepository,
        asset: str = "bitcoin",
        cache_ttl_seconds: int = 60,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._provider = provider
        self._cache = cache_repo
        self._asset = asset
        self._cache_ttl = cache_ttl_seconds
        self._clock = clock

    def get_current_price(self, series: Optional[PriceSeries] = None) -> CurrentPrice:
        """
        Return the current price tagged with its source.

        Raises PriceUnavailableError when the provider fails and neither a
        cached price nor a series is available.
        """
        now = to_utc(self._clock())
        cached = self._cache.get(self._asset)

        if cached and self._age_seconds(cached, now) < self._cache_ttl:
            logger.debug(
                "Using cached %s price %s (%.0fs old)",
                self._asset,
                cached.price,
                self._age_seconds(cached, now),
            )
            return CurrentPrice(
                value=cached.price,
                source=PriceSource.FRESH,
                as_of=to_utc(cached.fetched_at),
            )

        try:
            price = self._fetch()
        except Exception as e:
            logger.warning("Failed to fetch current %s price: %s", self._asset, e)
            return self._fallback(cached, series, now, reason=str(e))

        self._cache.upsert(PriceCacheEntry(asset=self._asset, price=price, fetched_at=now))
        logger.info("Fetched fresh %s price: %s", self._asset, price)
        return CurrentPrice(value=price, source=PriceSource.FRESH, as_of=now)

    def _fetch(self) -> float:
        price = self._provider.fetch_price()
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValueError(f"Provider returned a non-numeric price: {price!r}")
        if not math.isfinite(price) or price < 0:
            raise ValueError(f"Provider returned an invalid price: {price!r}")
        return float(price)

    def _fallback(
        self,
        cached: Optional[PriceCacheEntry],
        series: Optional[PriceSeries],
        now: datetime,
        reason: str,
    ) -> CurrentPrice:
        if cached:
            logger.warning(
                "Using expired cached %s price as fallback: %s (%.0fs old)",
                self._asset,
                cached.price,
                self._age_seconds(cached, now),
            )
            return CurrentPrice(
                value=cached.price,
                source=PriceSource.EXPIRED_CACHE,
                as_of=to_utc(cached.fetched_at),
            )

        if series is not None:
            latest = latest_price(series)
            as_of = start_of_day(latest.date)
            days_old = (now - as_of).total_seconds() / 86400
            if days_old > 1:
                logger.warning(
                    "Historical data is %d days old; current price may be inaccurate",
                    round(days_old),
                )
            logger.warning(
                "Using latest historical close as current price: %s (%s)",
                latest.price,
                latest.date.isoformat(),
            )
            return CurrentPrice(
                value=latest.price,
                source=PriceSource.FALLBACK_HISTORICAL,
                as_of=as_of,
            )

        raise PriceUnavailableError(reason)

    @staticmethod
    def _age_seconds(entry: PriceCacheEntry, now: datetime) -> float:
        return (now - to_utc(entry.fetched_at)).total_seconds()
