"""
Blog API SQLAlchemy Models

This package contains all database models for the Blog API.

Model Hierarchy:
================
    Author
       ├── profile (Profile | None)
       └── posts (Post[])
              └── post_categories (PostCategory[])
                     └── category (Category)

Models Overview:
================
- Base: Declarative base and timestamp mixin
- Author: Content creator
- Profile: Optional 1:1 author description
- Category: Named tag
- Post: Content owned by an author
- PostCategory: Junction table for posts and categories

Usage:
======
    from blog_api.shared.models import Author, Post, Category

    author = await repo.get(author_id)
"""

from blog_api.shared.models.base import Base, TimestampMixin
from blog_api.shared.models.author import Author
from blog_api.shared.models.profile import Profile
from blog_api.shared.models.category import Category
from blog_api.shared.models.post import Post
from blog_api.shared.models.post_category import PostCategory

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Models
    "Author",
    "Profile",
    "Category",
    "Post",
    "PostCategory",
]
