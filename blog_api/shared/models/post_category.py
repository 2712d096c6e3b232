"""
PostCategory Entity Model

Junction table linking Posts to Categories.

SAMPLE POST_CATEGORY RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ post_id          │ 7                                                         │
│ category_id      │ 2                                                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.shared.models.base import Base


if TYPE_CHECKING:
    from blog_api.shared.models.category import Category
    from blog_api.shared.models.post import Post


class PostCategory(Base):
    """
    PostCategory model - links posts to categories.

    Attributes:
        post_id: The tagged post (part of composite PK)
        category_id: The tag (part of composite PK)

    Relationships:
        post: The tagged post
        category: The category attached to the post
    """

    __tablename__ = "post_categories"

    # ═══════════════════════════════════════════════════════════════════════════
    # COMPOSITE PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    post: Mapped["Post"] = relationship(
        "Post",
        back_populates="post_categories",
    )

    category: Mapped["Category"] = relationship(
        "Category",
        back_populates="post_categories",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<PostCategory(post_id={self.post_id}, category_id={self.category_id})>"
