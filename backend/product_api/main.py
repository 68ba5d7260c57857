"""Product API — FastAPI application factory and process entrypoint.

Invariants:
    - create_app() receives settings and the DB manager as values; nothing is
      a module-level singleton (uvicorn runs it with --factory)
    - Routes registered explicitly (no auto-discovery)
    - CORS accepts the single configured frontend_url
    - Database connected on startup via lifespan; a failed connection is logged
      ("DB connection error") and the process keeps serving

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Swagger UI at /docs, generated from the route declarations
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from product_api.api.error_handlers import register_error_handlers
from product_api.api.routes import health, products
from product_api.config import Settings, get_settings
from product_api.infrastructure.cors import SingleOriginCORSMiddleware
from product_api.infrastructure.database import DatabaseSessionManager
from product_api.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)

logger = logging.getLogger(__name__)

API_TITLE = "REST API FastAPI / SQLAlchemy"
API_VERSION = "1.0.0"
OPENAPI_TAGS = [{"name": "Products", "description": "Products"}]


async def connect_db(db_manager: DatabaseSessionManager) -> bool:
    """Authenticate and sync tables. Failure is logged, never raised."""
    try:
        await db_manager.connect()
    except Exception as e:
        # Process stays up; requests fail later at the persistence layer.
        logger.error(f"DB connection error: {e}", exc_info=True)
        return False
    logger.info("Database connected")
    return True


def create_db_manager(settings: Settings) -> DatabaseSessionManager:
    return DatabaseSessionManager(
        settings.database_url, **settings.engine_options(),
    )


def create_app(
    settings: Settings | None = None,
    db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build the FastAPI app around the given settings and DB manager."""
    settings = settings or get_settings()
    db_manager = db_manager or create_db_manager(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        await connect_db(db_manager)
        logger.info(f"REST API listening on port {settings.port}")
        yield
        await db_manager.dispose()
        logger.info("Product API shutting down")

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description="API Docs for Products",
        openapi_tags=OPENAPI_TAGS,
        docs_url="/docs",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = db_manager

    app.add_middleware(
        SingleOriginCORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it wraps CORS rejections too
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router)
    app.include_router(products.router)

    register_error_handlers(app)
    return app


def run() -> None:
    """Console entrypoint: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "product_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
