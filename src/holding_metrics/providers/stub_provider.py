"""Stub price provider for offline/testing use."""

import random


class StubPriceProvider:
    """
    Deterministic offline provider.

    Returns base_price, optionally jittered by up to +/- jitter (a fraction)
    from a seeded generator so repeated runs see the same sequence.
    """

    def __init__(self, base_price: float = 50000.0, jitter: float = 0.0, seed: int = 42):
        self._base_price = base_price
        self._jitter = jitter
        self._rng = random.Random(seed)

    def fetch_price(self) -> float:
        if not self._jitter:
            return self._base_price
        change = (self._rng.random() * 2 - 1) * self._jitter
        return round(self._base_price * (1 + change), 2)
