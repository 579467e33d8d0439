"""Post repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.post import Post
from blog.domain.value import PostId, PostStatus


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations. Tag usage counts
    are maintained here: ``add`` and ``update`` are the only operations that
    change tag associations.
    """

    @abstractmethod
    async def get_by_id(self, post_id: PostId) -> Post:
        """Load a post without its tags, details or author.

        Args:
            post_id: The post's identifier

        Returns:
            The shallow post (``tags``, ``details`` and ``author`` are None)

        Raises:
            NotFoundError: If no post has this ID
        """
        pass

    @abstractmethod
    async def get_full_post_by_id(self, post_id: PostId) -> Post:
        """Load a post with tags, details and author attached.

        Tags come back in the order they were associated with the post.

        Args:
            post_id: The post's identifier

        Returns:
            The hydrated post

        Raises:
            NotFoundError: If no post has this ID
        """
        pass

    @abstractmethod
    async def find_latest(
        self, limit: int, status: PostStatus = PostStatus.LIVE
    ) -> list[Post]:
        """Find the most recently published posts in a given status.

        Args:
            limit: Maximum number of posts to return
            status: Only posts in this status are returned

        Returns:
            Hydrated posts, newest publication first
        """
        pass

    @abstractmethod
    async def add(self, post: Post) -> PostId:
        """Insert a new post with its details and tag associations.

        Unknown tags are created; every referenced tag's usage count goes up
        by one.

        Args:
            post: The post to insert (``details`` and ``author`` required)

        Returns:
            The generated post ID

        Raises:
            ValidationError: If details or author are missing
            NotFoundError: If the author does not exist
        """
        pass

    @abstractmethod
    async def update(self, post: Post) -> None:
        """Update a stored post's mutable fields.

        When ``post.tags`` is not None, the stored associations are reconciled
        with it. The author is never rewritten.

        Args:
            post: The post carrying new values (``id`` required)

        Raises:
            ValidationError: If the post has no ID
            NotFoundError: If no post has this ID
            IntegrityError: If a removed tag's usage count is already zero
        """
        pass
