"""
Category Entity Model

Named tag attached to posts through PostCategory.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.shared.models.base import Base


if TYPE_CHECKING:
    from blog_api.shared.models.post_category import PostCategory


class Category(Base):
    """Category model. Names are unique."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    post_categories: Mapped[list["PostCategory"]] = relationship(
        "PostCategory",
        back_populates="category",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"
