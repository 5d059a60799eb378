"""Async Engine Factory — builds engines and session factories outside the app lifespan.

Invariants:
    - Pool sizing only applied to pooled servers; SQLite engines keep the
      dialect's default pool
    - Sessions never expire attributes on commit

Design Decisions:
    - Shared by DatabaseSessionManager and test fixtures so both build engines
      the same way
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)


def create_engine_for_url(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> AsyncEngine:
    """Create an async engine, sizing the pool when the backend has one."""
    if make_url(database_url).get_backend_name() == "sqlite":
        return create_async_engine(database_url, echo=False)
    return create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
