"""Post aggregate root."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from blog.domain.model.common import DomainModel, as_utc
from blog.domain.model.post_details import PostDetails
from blog.domain.model.tag import Tag
from blog.domain.model.user import User
from blog.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Post aggregate root.

    Every field except ``id`` and ``author_id`` has to be passed explicitly.
    ``tags``, ``details`` and ``author`` are ``None`` when the post was loaded
    without hydration; an empty tag list means the post has no tags.

    The author is fixed once the post is stored: repositories never rewrite
    it on update.
    """

    id: Optional[PostId] = None
    title: str = Field(max_length=300)
    description: str
    status: PostStatus
    created_at: datetime
    published_at: Optional[datetime]
    photo_url: Optional[str]
    tags: Optional[list[Tag]]
    details: Optional[PostDetails]
    author: Optional[User]
    author_id: Optional[UserId] = None

    @model_validator(mode="before")
    @classmethod
    def derive_author_id(cls, data: Any) -> Any:
        """Fill author_id from the author when it is not given."""
        if isinstance(data, dict) and data.get("author_id") is None:
            author = data.get("author")
            if isinstance(author, dict):
                author_id = author.get("id")
            else:
                author_id = getattr(author, "id", None)
            if author_id is not None:
                data = {**data, "author_id": author_id}
        return data

    @field_validator("created_at", "published_at")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Keep every timestamp in UTC so it compares equal after storage."""
        return as_utc(v)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject blank titles."""
        if not v.strip():
            raise ValueError("Post title must not be empty")
        return v

    @model_validator(mode="after")
    def validate_post(self) -> "Post":
        """Check tag uniqueness and author consistency."""
        if self.tags is not None:
            names = [tag.name for tag in self.tags]
            if len(names) != len(set(names)):
                raise ValueError("Post tags must be unique")

        if (
            self.author is not None
            and self.author.id is not None
            and self.author_id != self.author.id
        ):
            raise ValueError("author_id does not match author.id")
        return self

    @property
    def tag_names(self) -> list[str]:
        """Names of the associated tags, in order (empty when not hydrated)."""
        return [tag.name for tag in self.tags or []]

    @property
    def is_hydrated(self) -> bool:
        """Whether tags, details and author are all loaded."""
        return (
            self.tags is not None
            and self.details is not None
            and self.author is not None
        )
