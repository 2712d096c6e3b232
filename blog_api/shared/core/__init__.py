"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from blog_api.shared.core.logging import logger, request_log_context
    from blog_api.shared.core.exceptions import BlogAPIException, NotFoundError

    logger.info("Starting operation", author_id=author_id)
"""

from blog_api.shared.core.logging import (
    logger,
    new_request_id,
    request_log_context,
)
from blog_api.shared.core.exceptions import (
    BlogAPIException,
    NotFoundError,
    AuthorNotFoundError,
    CategoryNotFoundError,
    ConflictError,
    DuplicateEmailError,
)

__all__ = [
    # Logging
    "logger",
    "new_request_id",
    "request_log_context",
    # Exceptions
    "BlogAPIException",
    "NotFoundError",
    "AuthorNotFoundError",
    "CategoryNotFoundError",
    "ConflictError",
    "DuplicateEmailError",
]
