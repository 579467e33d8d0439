"""In-memory post repository for testing."""

from datetime import datetime, timezone

from blog.domain.error import IntegrityError, NotFoundError, ValidationError
from blog.domain.model import Post, Tag, diff_tags
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId, PostStatus, TagId

from .database import InMemoryRepository


class InMemoryPostRepository(InMemoryRepository, PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def _get_stored(self, post_id: PostId) -> Post:
        post = self.database.posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    def _hydrate(self, post: Post) -> Post:
        tags = [
            self.database.tags[name]
            for stored_id, name in self.database.post_tags
            if stored_id == post.id
        ]
        return post.model_copy(
            update={
                "tags": tags,
                "details": self.database.post_details.get(post.id),
                "author": self.database.users.get(post.author_id),
            }
        )

    async def get_by_id(self, post_id: PostId) -> Post:
        """Load a post without its tags, details or author."""
        return self._get_stored(post_id)

    async def get_full_post_by_id(self, post_id: PostId) -> Post:
        """Load a post with tags, details and author attached."""
        return self._hydrate(self._get_stored(post_id))

    async def find_latest(
        self, limit: int, status: PostStatus = PostStatus.LIVE
    ) -> list[Post]:
        """Find the newest posts in a status, unpublished ones last."""
        posts = [p for p in self.database.posts.values() if p.status == status]
        posts.sort(
            key=lambda p: (
                p.published_at is not None,
                p.published_at or datetime.min.replace(tzinfo=timezone.utc),
                p.id,
            ),
            reverse=True,
        )
        return [self._hydrate(p) for p in posts[:limit]]

    async def add(self, post: Post) -> PostId:
        """Insert a post, its details and its tag associations."""
        if post.details is None:
            raise ValidationError("Post details are required to add a post")
        if post.author_id is None:
            raise ValidationError("Post author is required to add a post")
        if post.author_id not in self.database.users:
            raise NotFoundError("User", str(post.author_id))

        post_id = PostId(max(self.database.posts, default=0) + 1)
        self.database.posts[post_id] = post.model_copy(
            update={"id": post_id, "tags": None, "details": None, "author": None}
        )
        self.database.post_details[post_id] = post.details.model_copy(
            update={"post_id": post_id}
        )
        self._attach_tags(post_id, post.tag_names)
        return post_id

    async def update(self, post: Post) -> None:
        """Update mutable fields and reconcile tags; the author is left alone."""
        if post.id is None:
            raise ValidationError("Post ID is required to update a post")

        stored = self._get_stored(post.id)
        self.database.posts[post.id] = stored.model_copy(
            update={
                "title": post.title,
                "description": post.description,
                "status": post.status,
                "created_at": post.created_at,
                "published_at": post.published_at,
                "photo_url": post.photo_url,
            }
        )

        if post.tags is not None:
            previous = [
                name for stored_id, name in self.database.post_tags
                if stored_id == post.id
            ]
            changes = diff_tags(previous, post.tag_names)
            self._detach_tags(post.id, changes.removed)
            self._attach_tags(post.id, changes.added)

        if post.details is not None:
            self.database.post_details[post.id] = post.details.model_copy(
                update={"post_id": post.id}
            )

    def _attach_tags(self, post_id: PostId, names: list[str]) -> None:
        for name in names:
            tag = self.database.tags.get(name)
            if tag is None:
                tag = Tag(
                    id=TagId(self.database.next_tag_id()), name=name, usage_count=1
                )
            else:
                tag = tag.model_copy(update={"usage_count": tag.usage_count + 1})
            self.database.tags[name] = tag
            self.database.post_tags.append((post_id, name))

    def _detach_tags(self, post_id: PostId, names: list[str]) -> None:
        for name in names:
            self.database.post_tags.remove((post_id, name))
            tag = self.database.tags[name]
            if tag.usage_count <= 0:
                raise IntegrityError(
                    f"Usage count of tag '{name}' would drop below zero"
                )
            if tag.usage_count == 1:
                del self.database.tags[name]
            else:
                self.database.tags[name] = tag.model_copy(
                    update={"usage_count": tag.usage_count - 1}
                )
