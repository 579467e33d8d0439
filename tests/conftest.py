"""Test configuration and fixtures."""

from datetime import datetime
from typing import Optional

import logfire

from blog.domain.model import Post, PostDetails, Tag, User
from blog.domain.value import PostId, PostStatus, TagId, UserId, UserRole
from blog.persistence.repository.inmemory import InMemoryDatabase

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)

TESLA_ID = UserId(1)
EINSTEIN_ID = UserId(2)
LIVE_POST_ID = PostId(1)
DRAFT_POST_ID = PostId(2)
SEEDED_TAGS = ["agile", "javascript", "programming", "vue.js"]


def make_tesla() -> User:
    """User 1 from the seed data."""
    return User(
        id=TESLA_ID,
        first_name="Nikola",
        last_name="Tesla",
        registered_at=datetime(2000, 1, 1),
        email="tesla@example.com",
        bio="Inventor",
        role=UserRole.AUTHOR,
    )


def make_einstein() -> User:
    """User 2 from the seed data."""
    return User(
        id=EINSTEIN_ID,
        first_name="Albert",
        last_name="Einstein",
        registered_at=datetime(2000, 1, 1),
        email="einstein@example.com",
        bio=None,
        role=UserRole.AUTHOR,
    )


def make_post(
    title: str = "Vary clever post",
    tags: Optional[list[str]] = None,
    author: Optional[User] = None,
    status: PostStatus = PostStatus.LIVE,
    published_at: Optional[datetime] = datetime(2000, 1, 1),
    content: str = "<h1>Post headline!</h1>",
) -> Post:
    """Build a new, unsaved post authored by Tesla unless told otherwise.

    Args:
        title: Post title
        tags: Tag names, defaults to programming and C#
        author: Post author, defaults to Tesla
        status: Post status
        published_at: Publication time
        content: Details content

    Returns:
        Post ready to be added
    """
    tag_names = ["programming", "C#"] if tags is None else tags
    return Post(
        title=title,
        description="Post description",
        status=status,
        created_at=datetime(2000, 1, 1),
        published_at=published_at,
        photo_url="image.jpeg",
        tags=[Tag(name=name) for name in tag_names],
        details=PostDetails(content=content),
        author=author or make_tesla(),
    )


def seed_in_memory(database: InMemoryDatabase) -> None:
    """Load the same fixture data as tests/sql/populate_test_data.sql."""
    database.users[TESLA_ID] = make_tesla()
    database.users[EINSTEIN_ID] = make_einstein()

    for index, name in enumerate(SEEDED_TAGS, start=1):
        database.tags[name] = Tag(id=TagId(index), name=name, usage_count=1)

    database.posts[LIVE_POST_ID] = Post(
        id=LIVE_POST_ID,
        title="Hello world",
        description="The first post",
        status=PostStatus.LIVE,
        created_at=datetime(2000, 1, 1),
        published_at=datetime(2000, 1, 2),
        photo_url="hello.jpeg",
        tags=None,
        details=None,
        author=None,
        author_id=EINSTEIN_ID,
    )
    database.posts[DRAFT_POST_ID] = Post(
        id=DRAFT_POST_ID,
        title="Work in progress",
        description="Not published yet",
        status=PostStatus.DRAFT,
        created_at=datetime(2000, 1, 3),
        published_at=None,
        photo_url=None,
        tags=None,
        details=None,
        author=None,
        author_id=TESLA_ID,
    )

    database.post_tags.extend((LIVE_POST_ID, name) for name in SEEDED_TAGS)
    database.post_details[LIVE_POST_ID] = PostDetails(
        post_id=LIVE_POST_ID, content="<p>Hello from the first post</p>"
    )
    database.post_details[DRAFT_POST_ID] = PostDetails(
        post_id=DRAFT_POST_ID, content="<p>Draft content</p>"
    )
