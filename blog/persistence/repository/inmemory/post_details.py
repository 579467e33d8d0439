"""In-memory implementation of PostDetails repository for testing."""

from blog.domain.error import NotFoundError
from blog.domain.model.post_details import PostDetails
from blog.domain.repository.post_details import PostDetailsRepository
from blog.domain.value import PostId

from .database import InMemoryRepository


class InMemoryPostDetailsRepository(InMemoryRepository, PostDetailsRepository):
    """In-memory implementation of PostDetailsRepository for testing."""

    async def get_by_id(self, post_id: PostId) -> PostDetails:
        details = self.database.post_details.get(post_id)
        if details is None:
            raise NotFoundError("PostDetails", str(post_id))
        return details
