"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.value import PostId


class TagRepository(ABC):
    """Read access to tags.

    Tags are written only as a side effect of ``PostRepository.add`` and
    ``PostRepository.update``.
    """

    @abstractmethod
    async def get_all(self) -> list[Tag]:
        """Get every known tag with its usage count, ordered by name."""
        pass

    @abstractmethod
    async def get_tags_by_post_id(self, post_id: PostId) -> list[Tag]:
        """Get the tags associated with a post.

        Args:
            post_id: Post identifier

        Returns:
            Tags in association order (empty if the post has none or does
            not exist)
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Tag]:
        """Find a tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass
