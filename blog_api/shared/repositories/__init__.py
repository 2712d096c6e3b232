"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]     ← Generic CRUD operations
         │
         ├── AuthorRepository     ← Email lookup, eager-loaded listing
         ├── ProfileRepository    ← Author profiles
         ├── CategoryRepository   ← Batch insert by name
         └── PostRepository       ← Post + join rows, eager-loaded listing

Usage Example:
==============
    from blog_api.shared.repositories import AuthorRepository

    async def find_author(db: AsyncSession, email: str):
        repo = AuthorRepository(db)
        return await repo.get_by_email(email)
"""

from blog_api.shared.repositories.base import BaseRepository
from blog_api.shared.repositories.author_repository import AuthorRepository
from blog_api.shared.repositories.profile_repository import ProfileRepository
from blog_api.shared.repositories.category_repository import CategoryRepository
from blog_api.shared.repositories.post_repository import PostRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "AuthorRepository",
    "ProfileRepository",
    "CategoryRepository",
    "PostRepository",
]
