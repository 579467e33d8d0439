"""Post details repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.post_details import PostDetails
from blog.domain.value import PostId


class PostDetailsRepository(ABC):
    """Repository for the one-to-one content record of a post."""

    @abstractmethod
    async def get_by_id(self, post_id: PostId) -> PostDetails:
        """Get the details of a post.

        Args:
            post_id: The owning post's identifier

        Returns:
            The post's details

        Raises:
            NotFoundError: If the post has no details
        """
        pass
