"""SQLAlchemy implementation of PriceCacheRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from holding_metrics.core.dates import to_utc
from holding_metrics.domain.models import PriceCacheEntry
from holding_metrics.repositories.sqlalchemy.orm_models import PriceCacheORM


class SqlAlchemyPriceCacheRepository:
    """SQLAlchemy-backed spot price cache."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, asset: str) -> Optional[PriceCacheEntry]:
        """Get the cached price for an asset."""
        orm_entry = self._db.get(PriceCacheORM, asset)
        return self._to_domain(orm_entry) if orm_entry else None

    def upsert(self, entry: PriceCacheEntry) -> PriceCacheEntry:
        """Insert or update the cached price for an asset."""
        fetched_at = to_utc(entry.fetched_at).replace(tzinfo=None)
        orm_entry = self._db.get(PriceCacheORM, entry.asset)

        if orm_entry:
            orm_entry.price = entry.price
            orm_entry.fetched_at = fetched_at
        else:
            orm_entry = PriceCacheORM(
                asset=entry.asset,
                price=entry.price,
                fetched_at=fetched_at,
            )
            self._db.add(orm_entry)

        self._db.commit()
        self._db.refresh(orm_entry)
        return self._to_domain(orm_entry)

    def delete(self, asset: str) -> None:
        """Drop the cached price for an asset."""
        self._db.query(PriceCacheORM).filter(PriceCacheORM.asset == asset).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: PriceCacheORM) -> PriceCacheEntry:
        """Convert ORM entry to domain model."""
        return PriceCacheEntry(
            asset=orm.asset,
            price=float(orm.price),
            fetched_at=to_utc(orm.fetched_at),
        )
