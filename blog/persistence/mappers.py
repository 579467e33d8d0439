"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Mapping, Optional

from blog.domain.model import Post, PostDetails, Tag, User
from blog.domain.value import PostId, PostStatus, TagId, UserId, UserRole


def row_to_user(row: Mapping[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row mapping

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        registered_at=row["registered_at"],
        email=row["email"],
        bio=row.get("bio"),
        role=UserRole(row["role"]),
        is_active=bool(row["is_active"]),
    )


def user_to_dict(user: User) -> dict[str, Any]:
    """Convert User domain model to database dict.

    The ID is left out when it is not set so the store generates one.
    """
    values = {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "registered_at": user.registered_at,
        "email": user.email,
        "bio": user.bio,
        "role": user.role.value,
        "is_active": user.is_active,
    }
    if user.id is not None:
        values["id"] = user.id
    return values


def row_to_tag(row: Mapping[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(row["id"]),
        name=row["name"],
        usage_count=row["usage_count"],
    )


def row_to_post_details(row: Mapping[str, Any]) -> PostDetails:
    """Convert database row to PostDetails domain model."""
    return PostDetails(post_id=PostId(row["post_id"]), content=row["content"])


def row_to_post(
    row: Mapping[str, Any],
    tags: Optional[list[Tag]] = None,
    details: Optional[PostDetails] = None,
    author: Optional[User] = None,
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row mapping
        tags: Hydrated tags, or None for a shallow post
        details: Hydrated details, or None for a shallow post
        author: Hydrated author, or None for a shallow post

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        description=row["description"],
        status=PostStatus(row["status"]),
        created_at=row["created_at"],
        published_at=row.get("published_at"),
        photo_url=row.get("photo_url"),
        tags=tags,
        details=details,
        author=author,
        author_id=UserId(row["author_id"]),
    )


def post_to_dict(post: Post, include_author: bool = True) -> dict[str, Any]:
    """Convert Post domain model to a posts-table dict.

    Tags, details and the ID are not part of the posts row.

    Args:
        post: Post domain model
        include_author: False for updates, which must never touch the author

    Returns:
        Dict suitable for database insertion/update
    """
    values = {
        "title": post.title,
        "description": post.description,
        "status": post.status.value,
        "created_at": post.created_at,
        "published_at": post.published_at,
        "photo_url": post.photo_url,
    }
    if include_author:
        values["author_id"] = post.author_id
    return values
