"""
Expanded Schemas

Responses that embed related entities. Kept apart from the per-entity
modules because authors embed posts and posts embed authors.
"""

from typing import Optional

from blog_api.shared.schemas.author import AuthorResponse, ProfileResponse
from blog_api.shared.schemas.post import PostCategoryResponse, PostResponse


class AuthorWithRelationsResponse(AuthorResponse):
    """Author with profile and posts expanded, as returned by the listing."""

    profile: Optional[ProfileResponse] = None
    posts: list[PostResponse] = []


class PostWithRelationsResponse(PostResponse):
    """Post with author and categories expanded, as returned by the listing."""

    author: AuthorResponse
    post_categories: list[PostCategoryResponse] = []
