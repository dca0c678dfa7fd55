"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Storage engine and schema initialization

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings as default_settings
from app.infrastructure.departments.in_memory_repository import InMemoryDepartmentStore
from app.infrastructure.departments.schema import create_schema, seed_sample_departments
from app.interfaces.departments.dependencies import build_engine
from app.interfaces.departments.router import router as departments_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare storage on startup, release it on shutdown."""
    settings: Settings = app.state.settings
    engine = app.state.engine

    if engine is not None:
        create_schema(engine)
        if settings.seed_sample_data:
            seed_sample_departments(engine)

    logger.info(
        "%s %s started with %s storage",
        settings.project_name,
        settings.version,
        settings.storage_backend,
    )

    yield

    if engine is not None:
        engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to build the app with. Defaults to the
            environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, echo_sql=settings.database_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Storage ---
    app.state.settings = settings
    app.state.engine = None
    app.state.memory_store = None
    if settings.storage_backend == "memory":
        app.state.memory_store = InMemoryDepartmentStore()
    else:
        app.state.engine = build_engine(settings.database_url)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings.rate_limit_default)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(departments_router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn (console script entry point)."""
    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
    )


if __name__ == "__main__":
    run()
