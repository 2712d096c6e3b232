"""
Post Repository

Database operations specific to the Post model.

Common Operations:
==================
- create_with_categories() → Insert a post and its join rows together
- list_with_relations()    → Every post with author and categories loaded
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blog_api.shared.repositories.base import BaseRepository
from blog_api.shared.models.category import Category
from blog_api.shared.models.post import Post
from blog_api.shared.models.post_category import PostCategory


class PostRepository(BaseRepository[Post]):
    """
    Repository for Post database operations.

    Join rows in post_categories are written through the
    Post.post_categories relationship, never on their own.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize PostRepository.

        Args:
            session: Async database session
        """
        super().__init__(Post, session)

    async def create_with_categories(
        self,
        *,
        title: str,
        content: str,
        author_id: int,
        categories: Sequence[Category],
    ) -> Post:
        """
        Create a post and one join row per category in a single flush.

        Args:
            title: Post title
            content: Post body
            author_id: Id of an existing author
            categories: Existing categories to attach

        Returns:
            The created post

        SQL Generated:
            INSERT INTO posts (title, content, author_id) VALUES (...)
            INSERT INTO post_categories (post_id, category_id) VALUES (...), ...
        """
        return await self.create(
            title=title,
            content=content,
            author_id=author_id,
            post_categories=[PostCategory(category_id=category.id) for category in categories],
        )

    async def list_with_relations(self) -> list[Post]:
        """
        List every post with its author and categories eagerly loaded.

        Each join row is loaded together with its category.
        """
        return await self.list(
            options=(
                selectinload(Post.author),
                selectinload(Post.post_categories).selectinload(PostCategory.category),
            )
        )
