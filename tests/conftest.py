"""
pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite database built from the model
metadata. Foreign keys are switched on so cascades and RESTRICT behave
like they do on PostgreSQL.
"""

from typing import Any, AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_api.api.dependencies.database import get_db
from blog_api.api.main import create_application
from blog_api.shared.db import build_session_factory
from blog_api.shared.models import Base


TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory database shared by every session of one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory configured like the application's."""
    return build_session_factory(engine)


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """A session for service and repository tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client talking to the app, with get_db bound to the test database."""
    app = create_application()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as db:
            try:
                yield db
                await db.commit()
            except Exception:
                await db.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def author_payload() -> dict[str, Any]:
    """Valid body for POST /authors."""
    return {
        "name": "Ana Souza",
        "email": "ana@example.com",
        "bio": "Backend developer",
        "cpf": "123.456.789-00",
        "country": "Brazil",
    }


@pytest.fixture
def create_author(
    client: AsyncClient, author_payload: dict[str, Any]
) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Create an author through the API and return the response body."""

    async def _create(**overrides: Any) -> dict[str, Any]:
        response = await client.post("/authors", json={**author_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_categories(client: AsyncClient) -> Callable[..., Awaitable[None]]:
    """Create categories through the API."""

    async def _create(*names: str) -> None:
        response = await client.post("/categories", json={"names": list(names)})
        assert response.status_code == 201, response.text

    return _create
