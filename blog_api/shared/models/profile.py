"""
Profile Entity Model

Optional 1:1 extension of an Author holding a free-text description.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.shared.models.base import Base


if TYPE_CHECKING:
    from blog_api.shared.models.author import Author


class Profile(Base):
    """
    Profile model.

    author_id is unique, so an author can own one profile at most.
    """

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="profile",
    )

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, author_id={self.author_id})>"
