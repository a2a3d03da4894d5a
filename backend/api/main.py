"""
FastAPI application factory.

Builds the app with throttling, middleware, exception handlers and
routers. The lifespan owns the database engine: it creates it on startup, builds the
document store on app.state and disposes the engine on shutdown.

Dependencies: fastapi, slowapi, backend.api, backend.boundary, backend.observability, backend.configs
System role: API assembly and resource lifecycle
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from backend.api import api_router
from backend.api.error_handlers import register_exception_handlers
from backend.api.routers.health import health_check
from backend.api.throttling import build_limiter
from backend.boundary.db import create_all_tables, get_async_engine, get_async_session_factory
from backend.boundary.store import SqlDocumentStore
from backend.configs import Settings, get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings: Settings = app.state.settings

    # Startup
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    engine = get_async_engine(settings.database)
    try:
        if settings.store.create_tables_on_startup:
            await create_all_tables(engine)

        app.state.document_store = SqlDocumentStore(
            session_factory=get_async_session_factory(engine),
            collection=settings.store.collection,
        )
        logger.info(
            "Document store initialized",
            extra={"collection": settings.store.collection},
        )
    except Exception:
        logger.exception("Failed to initialize application resources")
        await engine.dispose()
        raise

    yield

    # Shutdown
    app.state.document_store = None
    await engine.dispose()
    logger.info("Application shutdown: database engine disposed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to run with (defaults to get_settings())

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="User Records API",
        description="User record management over a document store",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Per-client throttling, innermost middleware
    app.state.limiter = build_limiter(settings.api)
    app.state.limiter.exempt(health_check)
    app.add_middleware(SlowAPIMiddleware)

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register API routes with /api/v1 prefix for versioning
    app.include_router(api_router, prefix="/api/v1")

    return app
