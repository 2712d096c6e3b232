"""
Author Handler

Handles author and profile endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Domain errors (AuthorNotFoundError, DuplicateEmailError) and data-layer
errors propagate to the global exception handlers, which turn them into
404/400 responses.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response, status

from blog_api.shared.schemas.author import (
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
    ProfileCreate,
    ProfileResponse,
)
from blog_api.shared.schemas.common import MAX_RECORD_ID, ErrorResponse
from blog_api.shared.schemas.relations import AuthorWithRelationsResponse
from blog_api.shared.services.author_service import AuthorService
from blog_api.api.dependencies.services import get_author_service


router = APIRouter(
    responses={400: {"model": ErrorResponse}},
)

# Out-of-range ids fail validation (400) instead of reaching the database
AuthorId = Annotated[int, Path(le=MAX_RECORD_ID)]


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_author(
    author_data: AuthorCreate,
    author_service: AuthorService = Depends(get_author_service),
):
    """
    Create an author.

    When profileDescription is sent, the author's profile is created
    in the same transaction.

    Raises:
        400: If the email is already used
    """
    return await author_service.create_author(
        name=author_data.name,
        email=author_data.email,
        bio=author_data.bio,
        cpf=author_data.cpf,
        country=author_data.country,
        profile_description=author_data.profile_description,
    )


@router.get("", response_model=List[AuthorWithRelationsResponse])
async def list_authors(
    author_service: AuthorService = Depends(get_author_service),
):
    """
    List every author with profile and posts.
    """
    return await author_service.list_authors()


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    responses={404: {"model": ErrorResponse}},
)
async def show_author(
    author_id: AuthorId,
    author_service: AuthorService = Depends(get_author_service),
):
    """
    Get an author by id.

    Raises:
        404: If the author does not exist
    """
    return await author_service.get_author(author_id)


@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def update_author(
    author_id: AuthorId,
    author_data: AuthorUpdate,
    author_service: AuthorService = Depends(get_author_service),
):
    """
    Overwrite an author's fields.

    An omitted bio keeps the stored one; "bio": null clears it.

    Raises:
        404: If the author does not exist
        400: If another author already uses the email
    """
    await author_service.update_author(author_id, **author_data.model_dump(exclude_unset=True))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def delete_author(
    author_id: AuthorId,
    author_service: AuthorService = Depends(get_author_service),
):
    """
    Delete an author and its profile.

    Raises:
        404: If the author does not exist
        400: If the author still has posts
    """
    await author_service.delete_author(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{author_id}/profile",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def create_profile(
    author_id: AuthorId,
    profile_data: ProfileCreate,
    author_service: AuthorService = Depends(get_author_service),
):
    """
    Create the profile of an existing author.

    Raises:
        404: If the author does not exist
        400: If the author already has a profile
    """
    return await author_service.create_profile(author_id, profile_data.description)
