"""
Pytest configuration and fixtures for holding metrics tests.

This module provides:
- Time helpers for UTC instants
- Sample price series
- Deterministic and failing price providers
- In-memory SQLite database fixtures
- Service fixtures and an API test client
"""

from datetime import datetime, timedelta
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session

from holding_metrics.main import app
from holding_metrics.api import deps
from holding_metrics.config.settings import Settings, set_settings, reset_settings
from holding_metrics.core.dates import UTC
from holding_metrics.domain.models import PriceSeries, PriceSource
from holding_metrics.domain.views import CurrentPrice
from holding_metrics.repositories.memory import InMemoryPriceCacheRepository
from holding_metrics.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from holding_metrics.repositories.sqlalchemy import orm_models  # noqa: F401
from holding_metrics.repositories.sqlalchemy import SqlAlchemyPriceCacheRepository
from holding_metrics.services import PerformanceService, PriceService, parse_series


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create an aware UTC datetime."""
    return datetime(year, month, day, hour, minute, second, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests (a Monday)."""
    return utc_datetime(2024, 12, 16, 12, 0, 0)


# =============================================================================
# SERIES FIXTURES
# =============================================================================


SHORT_SERIES_RAW = {"start": "2024-12-14", "prices": [52000, 50000, 45000]}

# 2023-01-01 .. 2024-12-16 inclusive; close on day i is 40000 + 10 * i
LONG_SERIES_START = "2023-01-01"
LONG_SERIES_DAYS = 716


def long_series_price(offset: int) -> float:
    return 40000.0 + 10 * offset


@pytest.fixture
def short_series() -> PriceSeries:
    """Three closes ending 2024-12-16."""
    return parse_series(SHORT_SERIES_RAW)


@pytest.fixture
def long_series() -> PriceSeries:
    """Two years of steadily rising closes ending 2024-12-16."""
    return parse_series(
        {
            "start": LONG_SERIES_START,
            "prices": [long_series_price(i) for i in range(LONG_SERIES_DAYS)],
        }
    )


# =============================================================================
# PRICE FIXTURES
# =============================================================================


class FixedPriceProvider:
    """Provider returning a constant price and counting calls."""

    def __init__(self, price: float = 51000.0):
        self.price = price
        self.calls = 0

    def fetch_price(self) -> float:
        self.calls += 1
        return self.price


class FailingPriceProvider:
    """Provider that always raises."""

    def __init__(self):
        self.calls = 0

    def fetch_price(self) -> float:
        self.calls += 1
        raise ConnectionError("Network unavailable")


class MutableClock:
    """Clock whose time can be advanced by tests."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


def fresh_price(value: float, as_of: Optional[datetime] = None) -> CurrentPrice:
    """A live current price."""
    return CurrentPrice(
        value=value,
        source=PriceSource.FRESH,
        as_of=as_of or utc_datetime(2024, 12, 16, 12, 0, 0),
    )


def fallback_price(value: float, as_of: Optional[datetime] = None) -> CurrentPrice:
    """A current price that is really the latest historical close."""
    return CurrentPrice(
        value=value,
        source=PriceSource.FALLBACK_HISTORICAL,
        as_of=as_of or utc_datetime(2024, 12, 16),
    )


@pytest.fixture
def clock(fixed_now) -> MutableClock:
    return MutableClock(fixed_now)


@pytest.fixture
def fixed_provider() -> FixedPriceProvider:
    return FixedPriceProvider(51000.0)


@pytest.fixture
def failing_provider() -> FailingPriceProvider:
    return FailingPriceProvider()


@pytest.fixture
def memory_cache_repo() -> InMemoryPriceCacheRepository:
    return InMemoryPriceCacheRepository()


@pytest.fixture
def price_service(fixed_provider, memory_cache_repo, clock) -> PriceService:
    """PriceService over a fixed provider and in-memory cache."""
    return PriceService(
        provider=fixed_provider,
        cache_repo=memory_cache_repo,
        asset="bitcoin",
        cache_ttl_seconds=60,
        clock=clock,
    )


@pytest.fixture
def performance_service() -> PerformanceService:
    return PerformanceService()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sql_cache_repo(test_session) -> SqlAlchemyPriceCacheRepository:
    """Provide test PriceCacheRepository backed by SQLite."""
    return SqlAlchemyPriceCacheRepository(test_session)


# =============================================================================
# API TEST CLIENT FIXTURES
# =============================================================================


def _make_client(test_engine, series: PriceSeries, now: datetime, provider) -> TestClient:
    set_settings(Settings(database_url="sqlite://", log_level="WARNING"))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_series] = lambda: series
    app.dependency_overrides[deps.get_now] = lambda: now
    app.dependency_overrides[deps.get_price_provider] = lambda: provider
    return TestClient(app)


@pytest.fixture
def client(test_engine, long_series, fixed_now, fixed_provider) -> TestClient:
    """API client over the long series with a working price provider."""
    with _make_client(test_engine, long_series, fixed_now, fixed_provider) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


@pytest.fixture
def offline_client(test_engine, short_series, fixed_now, failing_provider) -> TestClient:
    """API client over the short series with the price provider down."""
    with _make_client(test_engine, short_series, fixed_now, failing_provider) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


# Closes before the market existed are stored as zero
EARLY_HISTORY_RAW = {"start": "2024-12-14", "prices": [0, 0, 50000]}


@pytest.fixture
def early_history_series() -> PriceSeries:
    """Series whose first two closes are zero, ending 2024-12-16."""
    return parse_series(EARLY_HISTORY_RAW)


@pytest.fixture
def early_history_client(test_engine, early_history_series, fixed_now, fixed_provider) -> TestClient:
    """API client over a series with leading zero closes."""
    with _make_client(test_engine, early_history_series, fixed_now, fixed_provider) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()
