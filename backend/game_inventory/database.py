"""
Game Inventory — Database Engine and Session Factory
=====================================================

What:  Async SQLAlchemy engine construction, session factory and ORM base.
How:   `create_engine()` builds an async engine from settings; the app
       lifespan calls it once at startup and `dispose_engine()` at shutdown.
       Nothing connects at import time.
Who:   Used by main.py (lifespan), the SQLAlchemy store, Alembic and tests.

Connection Pooling:
    PostgreSQL gets a sized pool with pre-ping and hourly recycling.
    SQLite gets SQLAlchemy's default pool plus `PRAGMA foreign_keys=ON`
    on every connection so the games → consoles reference is enforced.
"""

from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from game_inventory.config import settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for --autogenerate
    and tests use for `create_all`.
    """
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Build the async engine for `database_url` (defaults to settings).

    Pool options only apply to server databases; SQLite's pool classes
    reject them.
    """
    url = database_url or settings.database_url
    echo = settings.log_level == "DEBUG"

    if url.startswith("sqlite"):
        engine = create_async_engine(url, echo=echo)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=echo,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to `engine`.

    expire_on_commit=False: rows are converted to records after commit,
    which must not trigger a lazy reload outside the session.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables directly from metadata (tests and local SQLite runs)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    Gracefully close all connections in the pool.

    Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
