"""Contact Book API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ContactBookError → {"error": message} responses
    - CORS open to every origin by default (the UI runs on another port)
    - contacts table created on startup via lifespan if absent

Design Decisions:
    - create_app(settings) factory: tests build isolated apps; uvicorn uses
      the module-level `app`
    - DatabaseSessionManager stored on app.state, not a module singleton
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contactbook.api.error_handlers import register_error_handlers
from contactbook.api.routes import contacts, health
from contactbook.config import Settings, get_settings
from contactbook.infrastructure.database import DatabaseSessionManager
from contactbook.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.init_schema()
    logger.info("Connected to the database.")
    app.state.db_manager = manager
    logger.info(
        f"Server is running on http://localhost:{settings.port}",
    )
    yield
    logger.info("Contact Book API shutting down")
    await manager.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Contact Book API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(contacts.router)

    register_error_handlers(app)
    return app


app = create_app()
