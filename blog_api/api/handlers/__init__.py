"""
API Handlers

Route handlers for the Blog API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from blog_api.api.handlers import (
    author_handler,
    category_handler,
    post_handler,
    health_handler,
)

__all__ = [
    "author_handler",
    "category_handler",
    "post_handler",
    "health_handler",
]
