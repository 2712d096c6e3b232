"""
Blog API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           BLOG API                                          │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │           Request Logging / Exception Handlers               │          │
│   │  request_id bound per request, domain errors → 404/400      │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌──────────┐ ┌──────────┐ ┌────────────┐ ┌──────────┐     │          │
│   │  │  Health  │ │ Authors  │ │ Categories │ │  Posts   │     │          │
│   │  └──────────┘ └──────────┘ └────────────┘ └──────────┘     │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                Dependencies (Injected)                       │          │
│   │  ┌──────────┐ ┌──────────┐                                  │          │
│   │  │ Database │ │ Services │                                  │          │
│   │  └──────────┘ └──────────┘                                  │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection verified
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connection pool disposed

Usage:
======
    # Run with uvicorn
    uvicorn blog_api.api.main:app --host 0.0.0.0 --port 3333 --reload

    # Or programmatically
    from blog_api.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from blog_api.config.settings import settings
from blog_api.shared.db import init_db, close_db
from blog_api.shared.core.logging import logger
from blog_api.api.middleware import setup_exception_handlers, setup_request_logging
from blog_api.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database connection

    Shutdown:
    - Dispose the connection pool
    """
    logger.info(
        "Starting Blog API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        port=settings.PORT,
    )

    await init_db()

    logger.info("Blog API started successfully")

    yield

    logger.info("Shutting down Blog API")

    await close_db()

    logger.info("Blog API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Sets up exception handlers and request logging
    3. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Authors, profiles, categories and posts",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    setup_request_logging(app)

    register_routes(app)

    return app


# Create the application instance
app = create_application()
