"""Request Dependencies — per-request database session and contact repository.

Invariants:
    - The DatabaseSessionManager lives on app.state, set by the lifespan hook
    - One AsyncSession per request, closed when the response is sent

Design Decisions:
    - Routes depend on get_contact_repository, so tests swap the store with
      app.dependency_overrides instead of patching globals
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.config import Settings, get_settings
from contactbook.core.repository_protocols import ContactRepository
from contactbook.infrastructure.contact_repository import SqlContactRepository
from contactbook.infrastructure.database import DatabaseSessionManager


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with (falls back to the process settings)."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with manager.session() as session:
        yield session


async def get_contact_repository(
    db: AsyncSession = Depends(get_db),
) -> ContactRepository:
    return SqlContactRepository(db)
