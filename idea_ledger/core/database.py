"""Database engine and session management for the blob store.

The engine is synchronous: the core never suspends, so every operation runs
to completion before the next one starts.
"""

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings

logger = logging.getLogger(__name__)


def create_storage_engine(settings: Settings) -> Engine:
    """Create a SQLAlchemy engine for the configured storage URL."""
    url = settings.storage_url
    kwargs: dict = {"echo": settings.storage_echo}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory SQLite must share one connection or every session sees
        # an empty database
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    logger.info(f"Storage URL (masked): {url[:30]}...")
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to the storage engine."""
    return sessionmaker(
        engine,
        expire_on_commit=False,
        autoflush=False,
    )


def init_storage(engine: Engine) -> None:
    """Create the blob table if needed."""
    from ..models import Base

    Base.metadata.create_all(engine)


def close_storage(engine: Engine) -> None:
    """Close database connections."""
    engine.dispose()
