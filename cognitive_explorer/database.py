"""
Database connection management for the profile store.

Provides SQLModel engine and session factory. SQLite is the default backend;
any SQLAlchemy URL (e.g. PostgreSQL) can be supplied through DATABASE_URL.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlmodel import Session, SQLModel, create_engine

from cognitive_explorer.services.secret_manager import get_settings

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str = None):
    """
    Creates SQLAlchemy engine for the configured database.

    SQLite connections are shared across Streamlit/FastAPI worker threads,
    so same-thread checking is disabled. Server databases get a small pool
    that is recycled frequently in container environments.
    """
    settings = get_settings()
    database_url = database_url or settings.database_url

    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        echo=False,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )


# Global engine instance (lazy initialization)
_engine = None


def get_engine():
    """Returns the global database engine, creating it if needed."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
    return _engine


def init_db() -> None:
    """
    Initializes database schema and seeds the default profile.

    Creates all tables defined in SQLModel metadata.
    Safe to call multiple times (uses CREATE IF NOT EXISTS).
    """
    from cognitive_explorer.models import Profile  # noqa: F401 - Import for side effects
    from cognitive_explorer.services.profile_store import seed_default_profile

    engine = get_engine()
    SQLModel.metadata.create_all(engine)

    with get_session() as session:
        seed_default_profile(session)


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Usage:
        with get_session() as session:
            session.add(profile)
            session.commit()

    Automatically handles commit/rollback and session cleanup.

    Note: expire_on_commit=False allows using profiles after the session
    closes, which view models rely on between requests.
    """
    engine = get_engine()
    session = Session(engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
