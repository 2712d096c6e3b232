"""
Profile Repository

Database operations for author profiles.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.shared.repositories.base import BaseRepository
from blog_api.shared.models.profile import Profile


class ProfileRepository(BaseRepository[Profile]):
    """Repository for Profile database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Profile, session)
