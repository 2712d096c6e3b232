"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error and health responses
- author: Author and profile schemas
- category: Category schemas
- post: Post and join-row schemas
- relations: Listing responses with related entities expanded

Usage:
======
    from blog_api.shared.schemas.author import AuthorCreate, AuthorResponse
    from blog_api.shared.schemas.common import ErrorResponse
"""

from blog_api.shared.schemas.common import (
    BaseSchema,
    ErrorResponse,
    BatchResult,
    HealthResponse,
)
from blog_api.shared.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorUpdate,
    ProfileCreate,
    ProfileResponse,
    AuthorResponse,
)
from blog_api.shared.schemas.category import (
    CategoryBatchCreate,
    CategoryResponse,
)
from blog_api.shared.schemas.post import (
    PostCreate,
    PostResponse,
    PostCategoryResponse,
)
from blog_api.shared.schemas.relations import (
    AuthorWithRelationsResponse,
    PostWithRelationsResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorResponse",
    "BatchResult",
    "HealthResponse",
    # Author
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "ProfileCreate",
    "ProfileResponse",
    "AuthorResponse",
    # Category
    "CategoryBatchCreate",
    "CategoryResponse",
    # Post
    "PostCreate",
    "PostResponse",
    "PostCategoryResponse",
    # Expanded
    "AuthorWithRelationsResponse",
    "PostWithRelationsResponse",
]
