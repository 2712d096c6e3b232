"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by id
- get_by_ids()   → Fetch multiple records by ids
- list()         → List every record, optionally with eager loads
- exists()       → Check if record exists
- create()       → Create new record
- create_many()  → Insert many rows in one statement
- update()       → Write fields onto a loaded record
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class AuthorRepository(BaseRepository[Author]):
        pass

    repo = AuthorRepository(db)
    author = await repo.get(1)  # Returns Author, not Any!

Writes and the Request Transaction:
===================================
    POST /posts
        │
        ├── PostService checks author and categories (SELECTs)
        ├── PostRepository.create_with_categories()
        │       session.add(post)           # post + post_categories rows
        │       await session.flush()       # INSERTs sent, ids assigned
        │       await session.refresh()     # server defaults loaded
        │
        └── get_db() commits once the handler returns
                or rolls back if anything above raised

Repositories never commit. flush() is where UNIQUE and FOREIGN KEY
violations surface, still inside the request, so the error handler can
turn them into a 400 while get_db() discards the whole unit of work.
"""

from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption
from sqlalchemy.sql.functions import count as sql_count

from blog_api.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., Author, Post)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its id.

        Args:
            record_id: Primary key of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM authors WHERE id = 1
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, ids: Sequence[int]) -> list[ModelType]:
        """
        Get multiple records by their ids.

        Args:
            ids: Primary keys to fetch

        Returns:
            List of model instances (may be fewer than requested if some not found)

        SQL Generated:
            SELECT * FROM categories WHERE id IN (1, 2, 3)
        """
        if not ids:
            return []

        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.scalars().all())

    async def list(
        self,
        *,
        options: Sequence[ORMOption] = (),
    ) -> list[ModelType]:
        """
        List every record ordered by id.

        Args:
            options: Loader options (e.g. selectinload) applied to the query

        Returns:
            List of model instances

        SQL Generated:
            SELECT * FROM posts ORDER BY id
        """
        query = select(self.model)

        if options:
            query = query.options(*options)

        query = query.order_by(self.model.id)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def exists(self, record_id: int) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: The id to check

        Returns:
            True if record exists, False otherwise
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Related objects passed as keyword arguments (e.g. profile=Profile(...))
        are inserted in the same flush.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values
        """
        instance = self.model(**kwargs)

        self.session.add(instance)

        # Send INSERT now so the generated id and constraint errors are available
        await self.session.flush()

        # Load server defaults (created_at, updated_at)
        await self.session.refresh(instance)

        return instance

    async def create_many(self, rows: Sequence[dict[str, Any]]) -> int:
        """
        Insert many rows in a single statement.

        Either every row is inserted or, on a constraint violation, none is.

        Args:
            rows: Column values, one dict per row

        Returns:
            Number of rows inserted

        SQL Generated:
            INSERT INTO categories (name) VALUES ('a'), ('b'), ...
        """
        if not rows:
            return 0

        await self.session.execute(insert(self.model), list(rows))
        return len(rows)

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(self, instance: ModelType, **changes: Any) -> ModelType:
        """
        Write field values onto an already loaded record.

        Every given field is written, None included, so callers decide
        which fields are part of the update.

        Args:
            instance: Record loaded through this session
            **changes: Column values to set

        Returns:
            The same instance, refreshed from the database
        """
        for field, value in changes.items():
            setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: int) -> bool:
        """
        Hard delete a record by id.

        Foreign keys decide what happens to dependent rows; a RESTRICT
        violation is raised from flush().

        Args:
            record_id: Id of the record to delete

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
