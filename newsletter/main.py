"""Newsletter API — FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings and the session manager are passed in, stored on app.state,
      and reach handlers only through dependencies
    - Startup is fail-fast: a failed migration or unreachable database aborts the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Migrations run in a worker thread: alembic's env.py runs its own event loop
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from newsletter.api.error_handlers import register_error_handlers
from newsletter.api.routes import health, subscriptions
from newsletter.config import Settings
from newsletter.core.errors import DatabaseError
from newsletter.infrastructure.database import DatabaseSessionManager
from newsletter.infrastructure.migrations import run_migrations

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings, db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build the application around an explicit configuration and pool."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        manager: DatabaseSessionManager = app.state.db_manager
        try:
            if settings.run_migrations_on_startup:
                await asyncio.to_thread(run_migrations, settings.database_url)
            if not await manager.health_check():
                raise DatabaseError(
                    f"cannot reach {settings.database_host}:{settings.database_port}",
                    "connect",
                )
            logger.info(
                f"Newsletter API started on "
                f"{settings.application_host}:{settings.application_port}",
            )
            yield
            logger.info("Newsletter API shutting down")
        finally:
            await manager.dispose()

    app = FastAPI(title="Newsletter API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db_manager = db_manager or DatabaseSessionManager.from_settings(settings)

    app.include_router(health.router)
    app.include_router(subscriptions.router)

    register_error_handlers(app)
    return app
