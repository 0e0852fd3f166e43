"""
Async SQLAlchemy engine and session management.

The engine is created lazily so importing this module never opens a
connection or imports a database driver.
"""

from typing import AsyncGenerator

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from core.config import settings

logger = structlog.get_logger(__name__)

# Global instances (lazy-initialized)
_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """
    Get or create the async engine.

    SQLite runs without pooling; PostgreSQL uses a bounded queue pool.
    """
    global _engine

    if _engine is None:
        url = settings.database_url
        if url.startswith("sqlite"):
            _engine = create_async_engine(url, echo=settings.DB_ECHO, poolclass=NullPool)
        else:
            _engine = create_async_engine(
                url,
                echo=settings.DB_ECHO,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_pre_ping=True,
            )
        logger.info("database_engine_created", driver=url.split("://")[0])

    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory bound to the engine."""
    global _session_maker

    if _session_maker is None:
        _session_maker = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_maker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    Commits when the request handler returns normally and rolls back when it
    raises, so every request is a single transaction.
    """
    session = get_session_maker()()
    try:
        yield session
        if session.in_transaction():
            await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def init_db() -> None:
    """Create the engine and verify connectivity."""
    engine = get_engine()
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def create_tables() -> None:
    """Create all tables from model metadata (local development and seeding)."""
    from db.base import Base
    import models  # noqa: F401 - registers every mapper on Base.metadata

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_tables_created")


async def close_db() -> None:
    """Dispose of the engine and its pooled connections."""
    global _engine, _session_maker

    if _engine is not None:
        await _engine.dispose()
        logger.info("database_engine_disposed")

    _engine = None
    _session_maker = None
