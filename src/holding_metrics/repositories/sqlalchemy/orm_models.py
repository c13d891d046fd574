"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, DateTime, Float, String

from holding_metrics.repositories.sqlalchemy.database import Base


class PriceCacheORM(Base):
    """SQLAlchemy model for PriceCacheEntry (last fetched spot price)."""

    __tablename__ = "price_cache"

    asset = Column(String(64), primary_key=True)
    price = Column(Float, nullable=False)
    # Stored as naive UTC; SQLite drops tzinfo
    fetched_at = Column(DateTime, nullable=False)
