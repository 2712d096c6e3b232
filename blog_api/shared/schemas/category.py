"""
Category Schemas

Request/response models for category endpoints.
"""

from blog_api.shared.schemas.common import BaseSchema


class CategoryBatchCreate(BaseSchema):
    """Schema for bulk category creation."""

    names: list[str]


class CategoryResponse(BaseSchema):
    """Schema for category response."""

    id: int
    name: str
