"""
Post Handler

Handles post creation and listing.

ARCHITECTURE NOTE:
This handler follows the layered architecture:
  Handler → Service → Repository → Model

Missing authors or categories raise NotFoundError subclasses in the
service; the global exception handler answers them with 404.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from blog_api.shared.schemas.common import ErrorResponse
from blog_api.shared.schemas.post import PostCreate, PostResponse
from blog_api.shared.schemas.relations import PostWithRelationsResponse
from blog_api.shared.services.post_service import PostService
from blog_api.api.dependencies.services import get_post_service


router = APIRouter(
    responses={400: {"model": ErrorResponse}},
)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def create_post(
    post_data: PostCreate,
    post_service: PostService = Depends(get_post_service),
):
    """
    Create a post for an existing author.

    Every id in categories must belong to an existing category, otherwise
    nothing is created.

    Raises:
        404: If the author or any category does not exist
    """
    return await post_service.create_post(
        title=post_data.title,
        content=post_data.content,
        author_id=post_data.author_id,
        category_ids=post_data.categories,
    )


@router.get("", response_model=List[PostWithRelationsResponse])
async def list_posts(
    post_service: PostService = Depends(get_post_service),
):
    """
    List every post with its author and categories.
    """
    return await post_service.list_posts()
