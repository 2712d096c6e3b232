"""
Author Service

Business logic for authors and their profiles.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Domain rules (email uniqueness, author existence)

Every check here is a read followed by a write in the same request
session. The unique constraints on authors.email and profiles.author_id
back the checks up when two requests race.

Usage:
======
    from blog_api.shared.services.author_service import AuthorService

    service = AuthorService(db)
    author = await service.create_author(name=..., email=..., cpf=..., country=...)
"""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.shared.core.exceptions import AuthorNotFoundError, DuplicateEmailError
from blog_api.shared.core.logging import logger
from blog_api.shared.models.author import Author
from blog_api.shared.models.profile import Profile
from blog_api.shared.repositories.author_repository import AuthorRepository
from blog_api.shared.repositories.profile_repository import ProfileRepository


class AuthorService:
    """
    Service for author-related business logic.

    Handles:
    - Author creation (optionally with a nested profile)
    - Profile creation for an existing author
    - Listing, lookup, update and deletion

    Attributes:
        session: Database session
        repo: AuthorRepository instance
        profile_repo: ProfileRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthorService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = AuthorRepository(session)
        self.profile_repo = ProfileRepository(session)

    async def create_author(
        self,
        *,
        name: str,
        email: str,
        cpf: str,
        country: str,
        bio: Optional[str] = None,
        profile_description: Optional[str] = None,
    ) -> Author:
        """
        Create a new author.

        When profile_description is given, the profile is inserted in the
        same flush as the author.

        Raises:
            DuplicateEmailError: If the email is already used
        """
        if await self.repo.email_exists(email):
            raise DuplicateEmailError()

        fields = dict(name=name, email=email, bio=bio, cpf=cpf, country=country)
        if profile_description is not None:
            fields["profile"] = Profile(description=profile_description)

        author = await self.repo.create(**fields)

        logger.info(
            "Author created",
            author_id=author.id,
            with_profile=profile_description is not None,
        )
        return author

    async def create_profile(self, author_id: int, description: str) -> Profile:
        """
        Create the profile of an existing author.

        Raises:
            AuthorNotFoundError: If the author does not exist
        """
        if not await self.repo.exists(author_id):
            raise AuthorNotFoundError()

        profile = await self.profile_repo.create(author_id=author_id, description=description)

        logger.info("Profile created", author_id=author_id, profile_id=profile.id)
        return profile

    async def list_authors(self) -> list[Author]:
        """Every author with profile and posts loaded."""
        return await self.repo.list_with_relations()

    async def get_author(self, author_id: int) -> Author:
        """
        Get an author by id.

        Raises:
            AuthorNotFoundError: If the author does not exist
        """
        author = await self.repo.get(author_id)
        if not author:
            raise AuthorNotFoundError()
        return author

    async def update_author(self, author_id: int, **changes: Any) -> Author:
        """
        Overwrite an author's fields with the given values.

        Only fields present in changes are written, so an omitted bio
        keeps the stored one while bio=None clears it. Keeping the
        author's own email is not a conflict.

        Raises:
            AuthorNotFoundError: If the author does not exist
            DuplicateEmailError: If another author already uses the email
        """
        author = await self.repo.get(author_id)
        if not author:
            raise AuthorNotFoundError()

        email = changes.get("email")
        if email is not None and email != author.email:
            if await self.repo.email_exists(email):
                raise DuplicateEmailError()

        updated = await self.repo.update(author, **changes)

        logger.info("Author updated", author_id=author_id, fields=sorted(changes))
        return updated

    async def delete_author(self, author_id: int) -> None:
        """
        Delete an author.

        The profile goes with it. Posts are not touched here; the posts
        foreign key makes the database refuse the delete while any exist.

        Raises:
            AuthorNotFoundError: If the author does not exist
        """
        if not await self.repo.delete(author_id):
            raise AuthorNotFoundError()

        logger.info("Author deleted", author_id=author_id)
