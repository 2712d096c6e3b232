"""
Author Schemas

Request/response models for author and profile endpoints.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import EmailStr, Field, ValidatorFunctionWrapHandler, field_validator

from blog_api.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class AuthorBase(BaseSchema):
    """Fields shared by author create and update."""

    name: str = Field(min_length=1)
    email: EmailStr
    bio: Optional[str] = None
    cpf: str = Field(min_length=1, description="National tax id")
    country: str = Field(min_length=1)

    @field_validator("email", mode="wrap")
    @classmethod
    def keep_email_as_sent(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        """Validate the address but store it exactly as the client sent it."""
        handler(value)
        return value


class AuthorCreate(AuthorBase):
    """Schema for author creation, optionally with a profile."""

    profile_description: Optional[str] = Field(
        default=None,
        description="When present, a profile is created together with the author",
    )


class AuthorUpdate(AuthorBase):
    """
    Schema for author update. Every field except bio is required.

    An omitted bio leaves the stored value; an explicit null clears it.
    Handlers tell the two apart with model_dump(exclude_unset=True).
    """


class ProfileCreate(BaseSchema):
    """Schema for creating an author's profile."""

    description: str


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ProfileResponse(BaseSchema):
    """Schema for profile response."""

    id: int
    description: str
    author_id: int


class AuthorResponse(BaseSchema):
    """Schema for author response (scalar fields only)."""

    id: int
    name: str
    email: str
    bio: Optional[str] = None
    cpf: str
    country: str
    created_at: datetime
    updated_at: datetime

