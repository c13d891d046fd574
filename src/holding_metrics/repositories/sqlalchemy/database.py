"""Price cache database: engine, sessions and schema setup."""

from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from holding_metrics.config.settings import get_settings

Base = declarative_base()

# Built lazily from settings; reset_database() drops them after reconfiguration
_engine: Optional[Engine] = None
_sessions: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Get or create the engine for the configured database URL."""
    global _engine
    if _engine is None:
        url = get_settings().get_database_url()
        # SQLite connections are shared across the server's worker threads
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        _engine = create_engine(url, connect_args=connect_args, echo=False)
    return _engine


def get_db() -> Generator[Session, None, None]:
    """Yield a session for one request and close it afterwards."""
    global _sessions
    if _sessions is None:
        _sessions = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    db = _sessions()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create the price cache table if it does not exist."""
    from holding_metrics.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def reset_database() -> None:
    """Dispose of the engine so the next use picks up new settings."""
    global _engine, _sessions

    if _engine is not None:
        _engine.dispose()

    _engine = None
    _sessions = None
