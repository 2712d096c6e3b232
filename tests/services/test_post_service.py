"""
Tests for PostService and CategoryService.
"""

import pytest
from sqlalchemy import func, select

from blog_api.shared.core.exceptions import AuthorNotFoundError, CategoryNotFoundError
from blog_api.shared.models import Post, PostCategory
from blog_api.shared.services import AuthorService, CategoryService, PostService


@pytest.fixture
async def author(session):
    return await AuthorService(session).create_author(
        name="Ana Souza", email="ana@example.com", cpf="123.456.789-00", country="Brazil"
    )


@pytest.fixture
async def categories(session):
    await CategoryService(session).create_categories(["python", "sql"])


async def _count(session, model) -> int:
    return await session.scalar(select(func.count()).select_from(model))


class TestCategoryService:
    """Tests for bulk category creation."""

    async def test_returns_inserted_count(self, session):
        """Test the count matches the names given."""
        assert await CategoryService(session).create_categories(["a", "b"]) == 2

    async def test_empty_batch(self, session):
        """Test an empty batch inserts nothing."""
        assert await CategoryService(session).create_categories([]) == 0


class TestPostService:
    """Tests for post creation rules."""

    async def test_create_post_links_categories(self, session, author, categories):
        """Test one join row is written per category."""
        service = PostService(session)

        post = await service.create_post(
            title="Hello", content="World", author_id=author.id, category_ids=[1, 2]
        )

        assert post.author_id == author.id
        assert await _count(session, PostCategory) == 2

    async def test_unknown_author(self, session, categories):
        """Test the author check runs before anything is written."""
        with pytest.raises(AuthorNotFoundError):
            await PostService(session).create_post(
                title="Hello", content="World", author_id=99, category_ids=[1]
            )

        assert await _count(session, Post) == 0

    async def test_unknown_category(self, session, author, categories):
        """Test one missing category rejects the post."""
        with pytest.raises(CategoryNotFoundError):
            await PostService(session).create_post(
                title="Hello", content="World", author_id=author.id, category_ids=[1, 2, 999]
            )

        assert await _count(session, Post) == 0
        assert await _count(session, PostCategory) == 0

    async def test_repeated_category_id(self, session, author, categories):
        """Test [1, 1] resolves one category and is rejected."""
        with pytest.raises(CategoryNotFoundError):
            await PostService(session).create_post(
                title="Hello", content="World", author_id=author.id, category_ids=[1, 1]
            )

    async def test_list_posts_loads_relations(self, session, author, categories):
        """Test listed posts carry author and categories."""
        service = PostService(session)
        await service.create_post(
            title="Hello", content="World", author_id=author.id, category_ids=[2]
        )
        session.expunge_all()

        posts = await service.list_posts()

        assert posts[0].author.email == "ana@example.com"
        assert [link.category.name for link in posts[0].post_categories] == ["sql"]
