"""
Tests for the /posts endpoints.
"""

from sqlalchemy import func, select

from blog_api.shared.models import Post, PostCategory


async def _count(session_factory, model):
    async with session_factory() as db:
        return await db.scalar(select(func.count()).select_from(model))


class TestCreatePost:
    """Tests for POST /posts."""

    async def test_creates_post_with_categories(self, client, create_author, create_categories):
        """Test the post is created and linked to every category."""
        author = await create_author()
        await create_categories("python", "sql")

        response = await client.post(
            "/posts",
            json={
                "title": "Async SQLAlchemy",
                "content": "Sessions per request",
                "authorId": author["id"],
                "categories": [1, 2],
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Async SQLAlchemy"
        assert body["content"] == "Sessions per request"
        assert body["authorId"] == author["id"]
        assert isinstance(body["id"], int)

        posts = (await client.get("/posts")).json()
        assert sorted(link["category"]["name"] for link in posts[0]["postCategories"]) == [
            "python",
            "sql",
        ]

    async def test_without_categories(self, client, create_author):
        """Test a post can be created with an empty category list."""
        author = await create_author()

        response = await client.post(
            "/posts",
            json={"title": "Hello", "content": "World", "authorId": author["id"], "categories": []},
        )

        assert response.status_code == 201
        posts = (await client.get("/posts")).json()
        assert posts[0]["postCategories"] == []

    async def test_accepts_snake_case_author_id(self, client, create_author):
        """Test author_id is accepted as well as authorId."""
        author = await create_author()

        response = await client.post(
            "/posts",
            json={"title": "Hello", "content": "World", "author_id": author["id"]},
        )

        assert response.status_code == 201
        assert response.json()["authorId"] == author["id"]

    async def test_unknown_author(self, client, create_categories, session_factory):
        """Test an unknown author gives 404 and writes nothing."""
        await create_categories("python")

        response = await client.post(
            "/posts",
            json={"title": "Hello", "content": "World", "authorId": 999, "categories": [1]},
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Author not found"}
        assert await _count(session_factory, Post) == 0
        assert await _count(session_factory, PostCategory) == 0

    async def test_partially_unknown_categories(
        self, client, create_author, create_categories, session_factory
    ):
        """Test [1, 2, 999] with only 1 and 2 stored gives 404 and writes nothing."""
        author = await create_author()
        await create_categories("python", "sql")

        response = await client.post(
            "/posts",
            json={
                "title": "Hello",
                "content": "World",
                "authorId": author["id"],
                "categories": [1, 2, 999],
            },
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Some category informed does not exist"}
        assert await _count(session_factory, Post) == 0
        assert await _count(session_factory, PostCategory) == 0

    async def test_repeated_category_id_is_rejected(self, client, create_author, create_categories):
        """Test a repeated id fails the count comparison."""
        author = await create_author()
        await create_categories("python")

        response = await client.post(
            "/posts",
            json={"title": "Hello", "content": "World", "authorId": author["id"], "categories": [1, 1]},
        )

        assert response.status_code == 404

    async def test_missing_title_is_bad_request(self, client, create_author):
        """Test a body without title gives 400."""
        author = await create_author()

        response = await client.post(
            "/posts", json={"content": "World", "authorId": author["id"], "categories": []}
        )

        assert response.status_code == 400


    async def test_author_id_beyond_integer_range(self, client):
        """Test an out-of-range authorId is rejected before any query."""
        response = await client.post(
            "/posts",
            json={"title": "Hello", "content": "World", "authorId": 2**40, "categories": []},
        )

        assert response.status_code == 400


class TestListPosts:
    """Tests for GET /posts."""

    async def test_empty(self, client):
        """Test listing with no posts."""
        response = await client.get("/posts")

        assert response.status_code == 200
        assert response.json() == []

    async def test_expands_author_and_categories(self, client, create_author, create_categories):
        """Test every post carries its author and its join rows with categories."""
        author = await create_author()
        await create_categories("python", "sql")
        for title, categories in (("First", [1]), ("Second", [1, 2])):
            await client.post(
                "/posts",
                json={
                    "title": title,
                    "content": "...",
                    "authorId": author["id"],
                    "categories": categories,
                },
            )

        posts = (await client.get("/posts")).json()

        assert [post["title"] for post in posts] == ["First", "Second"]
        assert posts[0]["author"]["email"] == "ana@example.com"
        assert posts[0]["postCategories"] == [
            {"postId": posts[0]["id"], "categoryId": 1, "category": {"id": 1, "name": "python"}}
        ]
        assert {link["categoryId"] for link in posts[1]["postCategories"]} == {1, 2}
