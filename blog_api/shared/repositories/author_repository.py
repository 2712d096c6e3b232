"""
Author Repository

Database operations specific to the Author model.
Extends BaseRepository with author-specific query methods.

Common Operations:
==================
- get_by_email()        → Find author by email address
- list_with_relations() → Every author with profile and posts loaded
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blog_api.shared.repositories.base import BaseRepository
from blog_api.shared.models.author import Author


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author database operations.

    Provides methods for common author queries beyond basic CRUD:
    - Looking up authors by email
    - Listing authors with their profile and posts
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthorRepository.

        Args:
            session: Async database session
        """
        super().__init__(Author, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[Author]:
        """
        Get author by email address.

        Args:
            email: Email address to search for

        Returns:
            Author if found, None otherwise

        SQL Generated:
            SELECT * FROM authors WHERE email = 'ana@example.com'
        """
        result = await self.session.execute(select(Author).where(Author.email == email))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """
        Check if email already exists.

        Args:
            email: Email address to check

        Returns:
            True if some author uses it, False if available
        """
        author = await self.get_by_email(email)
        return author is not None

    async def list_with_relations(self) -> list[Author]:
        """
        List every author with profile and posts eagerly loaded.

        Uses selectinload so serialization never lazy-loads.
        """
        return await self.list(
            options=(
                selectinload(Author.profile),
                selectinload(Author.posts),
            )
        )
