"""SQLAlchemy repository implementations."""

from holding_metrics.repositories.sqlalchemy.database import (
    get_engine,
    get_db,
    init_db,
    reset_database,
    Base,
)
from holding_metrics.repositories.sqlalchemy.price_cache_repo import (
    SqlAlchemyPriceCacheRepository,
)

__all__ = [
    "get_engine",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyPriceCacheRepository",
]
