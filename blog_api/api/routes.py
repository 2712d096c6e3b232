"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready   → Health check endpoints
    /authors          → Authors (CRUD) and /authors/{id}/profile
    /categories       → Bulk category creation
    /posts            → Post creation and listing

Usage:
======
    from blog_api.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from blog_api.api.handlers import (
    author_handler,
    category_handler,
    post_handler,
    health_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        author_handler.router,
        prefix="/authors",
        tags=["Authors"],
    )

    app.include_router(
        category_handler.router,
        prefix="/categories",
        tags=["Categories"],
    )

    app.include_router(
        post_handler.router,
        prefix="/posts",
        tags=["Posts"],
    )
