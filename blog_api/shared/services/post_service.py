"""
Post Service

Business logic for posts.

Creation Rules:
===============
1. The author must exist                → else AuthorNotFoundError
2. Every requested category must exist  → else CategoryNotFoundError
   Checked by comparing how many categories were found with how many ids
   were sent, so a repeated id also fails the check.
3. Post and join rows are inserted together; nothing is written when
   either check fails.

Usage:
======
    from blog_api.shared.services.post_service import PostService

    service = PostService(db)
    post = await service.create_post(
        title="Hello", content="...", author_id=1, category_ids=[1, 2]
    )
"""

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.shared.core.exceptions import AuthorNotFoundError, CategoryNotFoundError
from blog_api.shared.core.logging import logger
from blog_api.shared.models.post import Post
from blog_api.shared.repositories.author_repository import AuthorRepository
from blog_api.shared.repositories.category_repository import CategoryRepository
from blog_api.shared.repositories.post_repository import PostRepository


class PostService:
    """
    Service for post-related business logic.

    Attributes:
        session: Database session
        repo: PostRepository instance
        author_repo: AuthorRepository instance
        category_repo: CategoryRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize PostService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = PostRepository(session)
        self.author_repo = AuthorRepository(session)
        self.category_repo = CategoryRepository(session)

    async def create_post(
        self,
        *,
        title: str,
        content: str,
        author_id: int,
        category_ids: list[int],
    ) -> Post:
        """
        Create a post attached to existing categories.

        Raises:
            AuthorNotFoundError: If the author does not exist
            CategoryNotFoundError: If any category id does not resolve
        """
        author = await self.author_repo.get(author_id)
        if not author:
            raise AuthorNotFoundError()

        categories = await self.category_repo.get_by_ids(category_ids)
        if len(categories) != len(category_ids):
            logger.info(
                "Post rejected, unknown categories",
                requested=len(category_ids),
                found=len(categories),
            )
            raise CategoryNotFoundError()

        post = await self.repo.create_with_categories(
            title=title,
            content=content,
            author_id=author.id,
            categories=categories,
        )

        logger.info(
            "Post created",
            post_id=post.id,
            author_id=author.id,
            category_count=len(categories),
        )
        return post

    async def list_posts(self) -> list[Post]:
        """Every post with author and categories loaded."""
        return await self.repo.list_with_relations()
