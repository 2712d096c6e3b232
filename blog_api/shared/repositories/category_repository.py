"""
Category Repository

Database operations for categories.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.shared.repositories.base import BaseRepository
from blog_api.shared.models.category import Category


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Category, session)

    async def create_many_by_name(self, names: Sequence[str]) -> int:
        """
        Insert one category per name in a single statement.

        Duplicate names are not filtered here; the unique constraint
        on categories.name rejects the whole batch.

        Returns:
            Number of categories inserted
        """
        return await self.create_many([{"name": name} for name in names])
