"""
Category Handler

Bulk category creation.
"""

from fastapi import APIRouter, Depends, status

from blog_api.shared.schemas.category import CategoryBatchCreate
from blog_api.shared.schemas.common import BatchResult, ErrorResponse
from blog_api.shared.services.category_service import CategoryService
from blog_api.api.dependencies.services import get_category_service


router = APIRouter()


@router.post(
    "",
    response_model=BatchResult,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_categories(
    data: CategoryBatchCreate,
    category_service: CategoryService = Depends(get_category_service),
):
    """
    Create one category per name.

    Returns the number of categories inserted. A duplicate name fails the
    whole batch with 400.
    """
    count = await category_service.create_categories(data.names)
    return BatchResult(count=count)
