"""
Custom Exceptions

Application-specific exceptions with HTTP status codes.

Exception Hierarchy:
====================
    BlogAPIException (base)
       │
       ├── NotFoundError (404)          ← Resource not found
       │      ├── AuthorNotFoundError
       │      └── CategoryNotFoundError
       └── ConflictError (400)          ← Resource already exists
              └── DuplicateEmailError

Conflicts are answered with 400, not 409: clients of this API treat an
already-used email as a bad request.

Usage:
======
    from blog_api.shared.core.exceptions import AuthorNotFoundError

    raise AuthorNotFoundError()
    # Results in: 404 {"message": "Author not found"}
"""

from typing import Any


class BlogAPIException(Exception):
    """
    Base exception for all Blog API application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
    """

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Response body for this error."""
        return {"message": self.message}


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(BlogAPIException):
    """Resource not found error (404 Not Found)."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message=message, status_code=404)


class AuthorNotFoundError(NotFoundError):
    """Author not found error."""

    def __init__(self) -> None:
        super().__init__("Author not found")


class CategoryNotFoundError(NotFoundError):
    """Raised when at least one requested category id does not exist."""

    def __init__(self) -> None:
        super().__init__("Some category informed does not exist")


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(BlogAPIException):
    """
    Resource conflict error (400 Bad Request).

    Raised when an operation conflicts with an existing resource.
    """

    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(message=message, status_code=400)


class DuplicateEmailError(ConflictError):
    """Author email already in use by another author."""

    def __init__(self) -> None:
        super().__init__("Email already exists")
