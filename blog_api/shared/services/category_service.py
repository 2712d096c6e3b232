"""
Category Service

Bulk creation of categories.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.shared.core.logging import logger
from blog_api.shared.repositories.category_repository import CategoryRepository


class CategoryService:
    """Service for category business logic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = CategoryRepository(session)

    async def create_categories(self, names: list[str]) -> int:
        """
        Insert one category per name.

        Names are not checked for duplicates; the store's unique
        constraint rejects the batch as a whole.

        Returns:
            Number of categories created
        """
        count = await self.repo.create_many_by_name(names)
        logger.info("Categories created", count=count)
        return count
