"""
API Middleware

Exception handlers and request logging.
"""

from blog_api.api.middleware.error_handler import setup_exception_handlers
from blog_api.api.middleware.request_logging import setup_request_logging

__all__ = [
    "setup_exception_handlers",
    "setup_request_logging",
]
