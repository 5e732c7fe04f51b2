"""Reviews API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly; health before the /api catch-all
    - The DatabaseSessionManager is created here and held on app.state (no module global)
    - CORS configured from settings (default: every origin, method and header)

Design Decisions:
    - create_app() factory: tests and servers build apps from explicit Settings
    - Lifespan over @app.on_event: engine disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reviews_api.api.error_handlers import register_error_handlers
from reviews_api.api.routes import health, reviews
from reviews_api.config import Settings, get_settings
from reviews_api.infrastructure.database import DatabaseSessionManager
from reviews_api.infrastructure.observability import setup_logging
import reviews_api.models  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if settings.database_create_tables:
        await app.state.db_manager.create_tables()
    logger.info("Reviews API started")
    yield
    await app.state.db_manager.dispose()
    logger.info("Reviews API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one DatabaseSessionManager."""
    settings = settings or get_settings()

    app = FastAPI(title="Reviews API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )

    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(reviews.router)
    return app


app = create_app()
