"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Share the request session, so one request is one transaction
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthorService: Authors and profiles
- CategoryService: Bulk category creation
- PostService: Post creation and listing

Usage:
======
    from blog_api.shared.services import AuthorService

    service = AuthorService(db)
    author = await service.get_author(1)
"""

from blog_api.shared.services.author_service import AuthorService
from blog_api.shared.services.category_service import CategoryService
from blog_api.shared.services.post_service import PostService

__all__ = [
    "AuthorService",
    "CategoryService",
    "PostService",
]
