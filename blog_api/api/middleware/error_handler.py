"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to JSON responses.

Error Response Format:
======================
    {
        "message": "Author not found"
    }

Exception Handling:
===================
1. BlogAPIException subclasses → Their status_code and to_dict()
2. Request validation errors   → 400 with validation details
3. SQLAlchemyError             → 400 with the database error message
4. HTTPException               → Its status code, detail as message
5. Other exceptions            → 500 with generic message (details hidden)

Usage:
======
    from blog_api.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.shared.core.exceptions import BlogAPIException
from blog_api.shared.core.logging import logger


def database_error_message(exc: SQLAlchemyError) -> str:
    """
    Message reported for a data-layer failure.

    Driver errors are wrapped by SQLAlchemy; the driver's own message is
    the useful part.
    """
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def _validation_body(errors: Any) -> dict[str, Any]:
    return {
        "message": "Request validation failed",
        "errors": jsonable_encoder(errors),
    }


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(BlogAPIException)
    async def blog_api_exception_handler(
        request: Request,
        exc: BlogAPIException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from BlogAPIException and carry
        their status code and message.
        """
        logger.warning(
            "Application error",
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle invalid request bodies and path parameters.

        Answered with 400 instead of FastAPI's default 422.
        """
        logger.warning(
            "Request validation error",
            errors=exc.errors(),
            path=request.url.path,
        )
        return JSONResponse(status_code=400, content=_validation_body(exc.errors()))

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised outside request parsing.
        """
        logger.warning(
            "Validation error",
            errors=exc.errors(),
            path=request.url.path,
        )
        return JSONResponse(status_code=400, content=_validation_body(exc.errors()))

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle data-layer failures.

        Constraint violations (duplicate category name, second profile for
        an author, deleting an author that still has posts) and any other
        database error become a 400 carrying the database message.
        """
        message = database_error_message(exc)
        logger.warning(
            "Database error",
            error=message,
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Keep framework errors (unknown route, wrong method) in the same shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred"},
        )
