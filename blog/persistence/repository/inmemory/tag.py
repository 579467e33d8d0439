"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId

from .database import InMemoryRepository


class InMemoryTagRepository(InMemoryRepository, TagRepository):
    """In-memory implementation of TagRepository for testing."""

    async def get_all(self) -> list[Tag]:
        """Get every known tag, ordered by name."""
        return sorted(self.database.tags.values(), key=lambda t: t.name)

    async def get_tags_by_post_id(self, post_id: PostId) -> list[Tag]:
        """Get the tags associated with a post, in association order."""
        return [
            self.database.tags[name]
            for stored_id, name in self.database.post_tags
            if stored_id == post_id
        ]

    async def find_by_name(self, name: str) -> Optional[Tag]:
        """Find tag by name."""
        return self.database.tags.get(name)
