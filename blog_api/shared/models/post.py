"""
Post Entity Model

Content written by one Author and tagged with zero or more Categories.

Model Hierarchy:
================
    Post
       ├── author (Author)                   - Owner, required
       └── post_categories (PostCategory[])  - Join rows to Category

SAMPLE POST RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ title            │ "Async SQLAlchemy in practice"                            │
│ content          │ "..."                                                     │
│ author_id        │ 1                                                         │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from blog_api.shared.models.author import Author
    from blog_api.shared.models.post_category import PostCategory


class Post(Base, TimestampMixin):
    """
    Post model.

    Attributes:
        id: Autoincrement integer identifier
        title: Post title
        content: Post body
        author_id: Owning author (required)

    Relationships:
        author: The owning author
        post_categories: Join rows, created together with the post
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # No ON DELETE action: deleting an author with posts is refused by the store
    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id"),
        nullable=False,
        index=True,
    )

    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="posts",
    )

    post_categories: Mapped[list["PostCategory"]] = relationship(
        "PostCategory",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author_id={self.author_id})>"
