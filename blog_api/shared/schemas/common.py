"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, camelCase aliases)
- RecordId: Integer id bounded to the INTEGER column range
- ErrorResponse: Body of every error response
- HealthResponse: Health check body

JSON Naming:
============
Fields are snake_case in Python and camelCase on the wire. Request bodies
accept either spelling (populate_by_name).

    class PostResponse(BaseSchema):
        author_id: int        # serialized as "authorId"
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Ids are INTEGER columns; larger values are rejected before they reach the driver
MAX_RECORD_ID = 2**31 - 1

RecordId = Annotated[int, Field(le=MAX_RECORD_ID)]


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request and response schemas inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - alias_generator: camelCase field names in JSON
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "message": "Author not found"
        }
    """

    message: str = Field(description="Human-readable error message")
    errors: Optional[list[dict[str, Any]]] = Field(
        default=None,
        description="Field-level validation errors, when the request body was invalid",
    )


class BatchResult(BaseModel):
    """Result of a batch insert."""

    count: int = Field(description="Number of rows inserted")


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "blog-api"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
