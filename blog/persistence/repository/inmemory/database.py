"""Shared state for the in-memory repositories."""

from copy import deepcopy
from typing import Any, Optional

from blog.domain.error import UnitOfWorkError
from blog.domain.model import Post, PostDetails, Tag, User
from blog.domain.value import PostId, UserId


class InMemoryDatabase:
    """Dictionaries standing in for the relational tables.

    ``posts`` holds shallow posts (no tags, details or author), ``tags`` is
    keyed by name, and ``post_tags`` keeps association rows in insertion
    order, mirroring the SQL schema.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.post_details: dict[PostId, PostDetails] = {}
        self.tags: dict[str, Tag] = {}
        self.post_tags: list[tuple[PostId, str]] = []

    def snapshot(self) -> dict[str, Any]:
        """Copy the current state so it can be restored later."""
        return deepcopy(
            {
                "users": self.users,
                "posts": self.posts,
                "post_details": self.post_details,
                "tags": self.tags,
                "post_tags": self.post_tags,
            }
        )

    def restore(self, snapshot: dict[str, Any]) -> None:
        """Put back a state taken with ``snapshot``."""
        state = deepcopy(snapshot)
        self.users = state["users"]
        self.posts = state["posts"]
        self.post_details = state["post_details"]
        self.tags = state["tags"]
        self.post_tags = state["post_tags"]

    def next_tag_id(self) -> int:
        return max((tag.id or 0 for tag in self.tags.values()), default=0) + 1


class InMemoryRepository:
    """Repository bound to the database for one unit of work block.

    Released repositories raise on use, matching the SQLAlchemy ones.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database: Optional[InMemoryDatabase] = database

    @property
    def database(self) -> InMemoryDatabase:
        if self._database is None:
            raise UnitOfWorkError("Unit of work is not active")
        return self._database

    def release(self) -> None:
        self._database = None
