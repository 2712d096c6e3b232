"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from blog_api.api.dependencies.services import get_author_service

    @router.get("/{author_id}")
    async def show(
        author_id: int,
        author_service: AuthorService = Depends(get_author_service),
    ):
        return await author_service.get_author(author_id)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.api.dependencies.database import get_db
from blog_api.shared.services.author_service import AuthorService
from blog_api.shared.services.category_service import CategoryService
from blog_api.shared.services.post_service import PostService


async def get_author_service(
    db: AsyncSession = Depends(get_db),
) -> AuthorService:
    """
    Dependency to get AuthorService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthorService(db)


async def get_category_service(
    db: AsyncSession = Depends(get_db),
) -> CategoryService:
    """
    Dependency to get CategoryService instance.
    """
    return CategoryService(db)


async def get_post_service(
    db: AsyncSession = Depends(get_db),
) -> PostService:
    """
    Dependency to get PostService instance.
    """
    return PostService(db)
