"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Services: get_*_service() functions

Usage:
======
    from blog_api.api.dependencies import DbSession

    @router.get("/ready")
    async def readiness(db: DbSession):
        ...
"""

from blog_api.api.dependencies.database import (
    get_db,
    DbSession,
)
from blog_api.api.dependencies.services import (
    get_author_service,
    get_category_service,
    get_post_service,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Services
    "get_author_service",
    "get_category_service",
    "get_post_service",
]
