"""
Author Entity Model

Represents a content creator.

Model Hierarchy:
================
    Author
       ├── profile (Profile | None)  - Optional 1:1 profile
       └── posts (Post[])            - Posts written by the author

SAMPLE AUTHOR RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 1                                                         │
│ name             │ "Ana Souza"                                               │
│ email            │ "ana@example.com"                                         │
│ bio              │ "Backend developer" (nullable)                            │
│ cpf              │ "123.456.789-00"                                          │
│ country          │ "Brazil"                                                  │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from blog_api.shared.models.profile import Profile
    from blog_api.shared.models.post import Post


class Author(Base, TimestampMixin):
    """
    Author model.

    Attributes:
        id: Autoincrement integer identifier
        name: Display name
        email: Contact email (unique)
        bio: Optional short biography
        cpf: National tax id
        country: Country of residence

    Relationships:
        profile: Optional profile, deleted together with the author
        posts: Posts owned by the author. The foreign key has no cascade,
            so the database refuses to delete an author that still has posts.
    """

    __tablename__ = "authors"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # FIELDS
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    cpf: Mapped[str] = mapped_column(String(20), nullable=False)

    country: Mapped[str] = mapped_column(String(100), nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    # One-to-One: Author has at most one profile
    profile: Mapped[Optional["Profile"]] = relationship(
        "Profile",
        back_populates="author",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # One-to-Many: Author has many posts; deletion is left to the FK
    posts: Mapped[list["Post"]] = relationship(
        "Post",
        back_populates="author",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Author(id={self.id}, email={self.email})>"
