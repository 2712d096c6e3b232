"""
Tests for AuthorService.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from blog_api.shared.core.exceptions import AuthorNotFoundError, DuplicateEmailError
from blog_api.shared.services import AuthorService


AUTHOR = dict(name="Ana Souza", email="ana@example.com", cpf="123.456.789-00", country="Brazil")


class TestAuthorService:
    """Tests for author business rules."""

    async def test_create_author_with_profile(self, session):
        """Test the nested profile is stored with the author."""
        service = AuthorService(session)

        author = await service.create_author(**AUTHOR, profile_description="Writes about SQL")
        session.expunge_all()
        listed = await service.list_authors()

        assert listed[0].id == author.id
        assert listed[0].profile.description == "Writes about SQL"
        assert listed[0].profile.author_id == author.id

    async def test_create_author_without_profile(self, session):
        """Test no profile row is created by default."""
        service = AuthorService(session)

        author = await service.create_author(**AUTHOR)
        session.expunge_all()
        listed = await service.list_authors()

        assert listed[0].id == author.id
        assert listed[0].profile is None
        assert listed[0].posts == []

    async def test_duplicate_email(self, session):
        """Test a second author with the same email is refused."""
        service = AuthorService(session)
        await service.create_author(**AUTHOR)

        with pytest.raises(DuplicateEmailError):
            await service.create_author(**{**AUTHOR, "name": "Other"})

    async def test_create_profile_for_missing_author(self, session):
        """Test a profile needs an existing author."""
        service = AuthorService(session)

        with pytest.raises(AuthorNotFoundError):
            await service.create_profile(42, "Nobody")

    async def test_second_profile_violates_unique_author(self, session):
        """Test the store refuses two profiles for one author."""
        service = AuthorService(session)
        author = await service.create_author(**AUTHOR)
        await service.create_profile(author.id, "First")

        with pytest.raises(IntegrityError):
            await service.create_profile(author.id, "Second")

    async def test_update_keeps_bio_when_none(self, session):
        """Test a None bio leaves the stored bio."""
        service = AuthorService(session)
        author = await service.create_author(**AUTHOR, bio="Original")

        updated = await service.update_author(author.id, **{**AUTHOR, "name": "Ana S."})

        assert updated.name == "Ana S."
        assert updated.bio == "Original"

    async def test_update_with_none_bio_clears_it(self, session):
        """Test an explicit bio=None is written."""
        service = AuthorService(session)
        author = await service.create_author(**AUTHOR, bio="Original")

        updated = await service.update_author(author.id, **AUTHOR, bio=None)

        assert updated.bio is None

    async def test_update_to_other_authors_email(self, session):
        """Test taking another author's email is a conflict."""
        service = AuthorService(session)
        await service.create_author(**AUTHOR)
        other = await service.create_author(**{**AUTHOR, "email": "bruno@example.com"})

        with pytest.raises(DuplicateEmailError):
            await service.update_author(other.id, **AUTHOR)

    async def test_get_and_delete_missing_author(self, session):
        """Test lookups of unknown ids raise AuthorNotFoundError."""
        service = AuthorService(session)

        with pytest.raises(AuthorNotFoundError):
            await service.get_author(7)
        with pytest.raises(AuthorNotFoundError):
            await service.update_author(7, **AUTHOR)
        with pytest.raises(AuthorNotFoundError):
            await service.delete_author(7)
