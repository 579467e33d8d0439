"""Tag entity for categorizing posts."""

from typing import Any, Optional

from pydantic import Field, field_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import TagId


class Tag(DomainModel):
    """Tag entity for categorizing posts.

    Tag names are unique across the tag set. ``usage_count`` is the number of
    posts currently associated with the tag; it is maintained by the post
    repository and ignored when a caller hands a tag in for writing.
    """

    id: Optional[TagId] = None
    name: str = Field(max_length=50)
    usage_count: int = Field(default=0, ge=0)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        """Trim surrounding whitespace before the length check."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that are empty once trimmed."""
        if not v:
            raise ValueError("Tag name must not be empty")
        return v


class TagChanges(DomainModel):
    """Tag names to attach and detach when a post's tag list changes."""

    added: list[str] = []
    removed: list[str] = []

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


def diff_tags(previous: list[str], current: list[str]) -> TagChanges:
    """Compare a post's stored tag names with its new ones.

    Both results keep the order of the list they come from, so newly added
    tags are associated in the order the caller listed them.

    Args:
        previous: Tag names currently associated with the post
        current: Tag names the post should end up with

    Returns:
        Names to add and names to remove
    """
    previous_set = set(previous)
    current_set = set(current)
    return TagChanges(
        added=[name for name in current if name not in previous_set],
        removed=[name for name in previous if name not in current_set],
    )
