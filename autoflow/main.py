"""FastAPI application entry point.

This module initializes the FastAPI application with all routes,
middleware, and lifecycle handlers.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from autoflow import __version__
from autoflow.api.deps import Store
from autoflow.api.errors import register_exception_handlers
from autoflow.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from autoflow.api.routes import (
    auth_router,
    executions_router,
    integrations_router,
    system_router,
    templates_router,
    workflows_router,
)
from autoflow.api.routes.system import uptime_seconds
from autoflow.config import settings
from autoflow.services.store import get_store
from autoflow.services.user_service import UserService

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer() if not settings.debug else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.log_level)
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

FEATURES = [
    "Visual Workflow Builder",
    "Enterprise Security (SSO, MFA, RBAC)",
    "25+ Pre-built Integrations",
    "Real-time Monitoring",
    "Custom Integration SDK",
    "Workflow Templates",
    "API Key Management",
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Handles startup and shutdown events.
    """
    # Startup
    logger.info(
        "application_starting",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        log_level=settings.log_level,
        jwt_secret=settings.get_masked_key("jwt_secret"),
    )

    if settings.database_url or settings.redis_url:
        logger.warning(
            "external_storage_ignored",
            database_configured=settings.database_url is not None,
            redis_configured=settings.redis_url is not None,
        )

    admin = UserService(get_store()).ensure_default_admin()
    if admin is not None:
        logger.info("default_admin_ready", email=admin.email)

    yield

    # Shutdown
    logger.info("application_shutting_down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="AutoFlow Enterprise Platform",
        description="Workflow automation platform with in-memory storage",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # One limiter per app, so each app counts requests in its own storage
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(app)

    # Last added is outermost, so access logging sees every response
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Register API routes
    app.include_router(auth_router, prefix="/api")
    app.include_router(
        workflows_router,
        prefix="/api/workflows",
        tags=["workflows"],
    )
    app.include_router(
        integrations_router,
        prefix="/api/integrations",
        tags=["integrations"],
    )
    app.include_router(
        templates_router,
        prefix="/api/templates",
        tags=["templates"],
    )
    app.include_router(
        executions_router,
        prefix="/api/executions",
        tags=["executions"],
    )
    app.include_router(system_router, prefix="/api")

    # Health check endpoint
    @app.get("/health", tags=["health"])
    @limiter.exempt
    async def health_check() -> dict[str, Any]:
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
            "environment": settings.environment,
            "uptime": uptime_seconds(),
        }

    @app.get("/", tags=["health"])
    async def root(store: Store) -> dict[str, Any]:
        """Service banner."""
        return {
            "name": "AutoFlow Enterprise Platform",
            "version": __version__,
            "description": "Complete automation platform with 25+ integrations",
            "features": FEATURES,
            "integrations": len(store.integrations),
            "templates": len(store.templates),
            "endpoints": {
                "auth": "/api/auth",
                "workflows": "/api/workflows",
                "integrations": "/api/integrations",
                "executions": "/api/executions",
                "templates": "/api/templates",
            },
            "status": "operational",
            "documentation": "Visit /api/docs for API documentation",
        }

    # Instrument with OpenTelemetry
    FastAPIInstrumentor.instrument_app(app)

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "autoflow.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
