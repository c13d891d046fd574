"""CoinGecko simple-price provider."""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class CoinGeckoPriceProvider:
    """
    Fetches a spot price from CoinGecko's /simple/price endpoint.

    Response shape: {"bitcoin": {"usd": 97123.0}}
    """

    def __init__(
        self,
        url: str,
        asset: str = "bitcoin",
        quote_currency: str = "usd",
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._asset = asset
        self._quote_currency = quote_currency
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    def fetch_price(self) -> float:
        logger.debug("Fetching %s/%s from %s", self._asset, self._quote_currency, self._url)
        response = self._session.get(
            self._url,
            params={"ids": self._asset, "vs_currencies": self._quote_currency},
            timeout=self._timeout,
        )
        response.raise_for_status()
        data = response.json()

        try:
            price = data[self._asset][self._quote_currency]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid API response format: {data!r}") from e
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValueError(f"Invalid API response format: {data!r}")
        return float(price)
