"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (accounts and health)
- Error handlers (centralized failure-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The accounts database engine

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings
from app.infrastructure.accounts.database import build_engine
from app.infrastructure.accounts.schema import create_schema
from app.interfaces.accounts.router import router as accounts_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the schema, dispose the engine on shutdown."""
    engine = app.state.db_engine
    if app.state.settings.create_schema:
        create_schema(engine)

    yield

    engine.dispose()
    logger.info("Database engine disposed")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.db_engine = build_engine(app_settings.database_url)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(
        default_limit=app_settings.rate_limit_default,
        enabled=app_settings.rate_limit_enabled,
    )
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(accounts_router)

    return app


app = create_app()
