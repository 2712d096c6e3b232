"""
Post Schemas

Request/response models for post endpoints.

Listing shape:
==============
    {
        "id": 7,
        "title": "...",
        "content": "...",
        "authorId": 1,
        "author": {"id": 1, "name": "...", ...},
        "postCategories": [
            {"postId": 7, "categoryId": 2, "category": {"id": 2, "name": "python"}}
        ]
    }
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog_api.shared.schemas.common import BaseSchema, RecordId
from blog_api.shared.schemas.category import CategoryResponse


class PostCreate(BaseSchema):
    """Schema for post creation."""

    title: str = Field(min_length=1)
    content: str
    author_id: RecordId
    categories: list[RecordId] = Field(
        default_factory=list,
        description="Ids of existing categories to attach",
    )


class PostResponse(BaseSchema):
    """Schema for post response (scalar fields only)."""

    id: int
    title: str
    content: str
    author_id: int
    created_at: datetime
    updated_at: datetime


class PostCategoryResponse(BaseSchema):
    """Join row with its category expanded."""

    post_id: int
    category_id: int
    category: Optional[CategoryResponse] = None

