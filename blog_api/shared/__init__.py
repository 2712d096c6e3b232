"""
Shared Module

Domain code used by the API layer and by Alembic:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── migrations/     ← Alembic environment and revisions

Usage:
======
    from blog_api.shared.models import Author, Post
    from blog_api.shared.repositories import AuthorRepository
    from blog_api.shared.services import PostService
    from blog_api.shared.schemas import AuthorCreate, PostWithRelationsResponse
    from blog_api.shared.core import logger, BlogAPIException
"""
