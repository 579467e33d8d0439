"""Domain value objects for the blog engine."""

from blog.domain.value.identifiers import PostId, TagId, UserId
from blog.domain.value.types import PostStatus, UserRole

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "TagId",
    # Types
    "PostStatus",
    "UserRole",
]
