"""Home page service."""

import logfire

from blog.config import HomePageSettings
from blog.domain.model import Post
from blog.domain.repository import UnitOfWork
from blog.domain.value import PostId


class HomePageService:
    """Assembles the posts shown on the home page.

    Each call runs in its own unit of work, so the session is released before
    the posts are handed to the presentation layer. Repository errors are
    passed through untouched.
    """

    def __init__(self, unit_of_work: UnitOfWork, settings: HomePageSettings) -> None:
        """Initialize home page service.

        Args:
            unit_of_work: Request-scoped unit of work
            settings: Home page composition settings
        """
        self.unit_of_work = unit_of_work
        self.settings = settings

    async def get_featured_post(self) -> Post:
        """Get the featured post with tags, details and author.

        Returns:
            The hydrated featured post

        Raises:
            NotFoundError: If the configured post does not exist
        """
        post_id = PostId(self.settings.featured_post_id)
        with logfire.span("home_page_service.get_featured_post", post_id=post_id):
            async with self.unit_of_work as uow:
                post = await uow.posts.get_full_post_by_id(post_id)

            logfire.info("Featured post loaded", post_id=post_id, title=post.title)
            return post

    async def get_posts(self) -> list[Post]:
        """Get the newest live posts, each with tags, details and author.

        Returns:
            At most ``number_of_posts`` posts, newest publication first
        """
        limit = self.settings.number_of_posts
        with logfire.span("home_page_service.get_posts", limit=limit):
            async with self.unit_of_work as uow:
                posts = await uow.posts.find_latest(limit=limit)

            logfire.info("Home page posts loaded", count=len(posts))
            return posts
