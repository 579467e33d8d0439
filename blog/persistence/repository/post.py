"""SQLAlchemy implementation of Post repository."""

from collections import defaultdict
from typing import Iterable

import logfire
from sqlalchemy import delete, desc, insert, nulls_last, select, update
from sqlalchemy.engine import RowMapping

from blog.domain.error import IntegrityError, NotFoundError, ValidationError
from blog.domain.model import Post, PostDetails, Tag, User, diff_tags
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId, PostStatus, TagId, UserId
from blog.persistence.mappers import (
    post_to_dict,
    row_to_post,
    row_to_post_details,
    row_to_tag,
    row_to_user,
)
from blog.persistence.repository.base import SqlAlchemyRepository
from blog.persistence.tables import (
    post_details_table,
    post_tags_table,
    posts_table,
    tags_table,
    users_table,
)


class SqlAlchemyPostRepository(SqlAlchemyRepository, PostRepository):
    """SQLAlchemy implementation of PostRepository.

    Tag usage counts are adjusted with SQL-level increments in the same
    session as the association rows, so they commit or roll back together.
    """

    async def _fetch_post_row(self, post_id: PostId) -> RowMapping:
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if row is None:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", str(post_id))
        return row

    async def _fetch_tags_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, list[Tag]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> tags in association order
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.id)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[PostId, list[Tag]] = defaultdict(list)
        for row in result.mappings().all():
            post_tag_map[PostId(row["post_id"])].append(row_to_tag(row))

        return post_tag_map

    async def _fetch_details_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, PostDetails]:
        if not post_ids:
            return {}

        stmt = select(post_details_table).where(
            post_details_table.c.post_id.in_(post_ids)
        )
        result = await self.session.execute(stmt)
        return {
            PostId(row["post_id"]): row_to_post_details(row)
            for row in result.mappings().all()
        }

    async def _fetch_authors(self, author_ids: Iterable[UserId]) -> dict[UserId, User]:
        author_ids = list(set(author_ids))
        if not author_ids:
            return {}

        stmt = select(users_table).where(users_table.c.id.in_(author_ids))
        result = await self.session.execute(stmt)
        return {UserId(row["id"]): row_to_user(row) for row in result.mappings().all()}

    async def _hydrate(self, rows: list[RowMapping]) -> list[Post]:
        """Build fully hydrated posts, batching each relation into one query."""
        post_ids = [PostId(row["id"]) for row in rows]
        tags = await self._fetch_tags_for_posts(post_ids)
        details = await self._fetch_details_for_posts(post_ids)
        authors = await self._fetch_authors(UserId(row["author_id"]) for row in rows)

        return [
            row_to_post(
                row,
                tags=tags.get(row["id"], []),
                details=details.get(row["id"]),
                author=authors.get(row["author_id"]),
            )
            for row in rows
        ]

    async def get_by_id(self, post_id: PostId) -> Post:
        """Load a post without its tags, details or author."""
        with logfire.span("post_repository.get_by_id", post_id=post_id):
            row = await self._fetch_post_row(post_id)
            return row_to_post(row)

    async def get_full_post_by_id(self, post_id: PostId) -> Post:
        """Load a post with tags, details and author attached."""
        with logfire.span("post_repository.get_full_post_by_id", post_id=post_id):
            row = await self._fetch_post_row(post_id)
            [post] = await self._hydrate([row])
            return post

    async def find_latest(
        self, limit: int, status: PostStatus = PostStatus.LIVE
    ) -> list[Post]:
        """Find the most recently published posts in a given status."""
        with logfire.span(
            "post_repository.find_latest", limit=limit, status=status.value
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.status == status.value)
                .order_by(
                    nulls_last(desc(posts_table.c.published_at)),
                    desc(posts_table.c.id),
                )
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            rows = list(result.mappings().all())

            if not rows:
                logfire.info("No posts found", status=status.value)
                return []

            posts = await self._hydrate(rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def add(self, post: Post) -> PostId:
        """Insert a post, its details and its tag associations."""
        with logfire.span(
            "post_repository.add", title=post.title, tags=post.tag_names
        ):
            if post.details is None:
                raise ValidationError("Post details are required to add a post")
            if post.author_id is None:
                raise ValidationError("Post author is required to add a post")

            await self._ensure_author_exists(post.author_id)

            result = await self.session.execute(
                insert(posts_table).values(**post_to_dict(post))
            )
            post_id = PostId(result.inserted_primary_key[0])

            await self.session.execute(
                insert(post_details_table).values(
                    post_id=post_id, content=post.details.content
                )
            )
            await self._attach_tags(post_id, post.tag_names)

            await self.session.flush()
            logfire.info("Post added", post_id=post_id, tags=post.tag_names)
            return post_id

    async def update(self, post: Post) -> None:
        """Update mutable fields and reconcile tags; the author is left alone."""
        if post.id is None:
            raise ValidationError("Post ID is required to update a post")

        with logfire.span("post_repository.update", post_id=post.id):
            result = await self.session.execute(
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**post_to_dict(post, include_author=False))
            )
            if result.rowcount == 0:
                logfire.warn("Post not found for update", post_id=post.id)
                raise NotFoundError("Post", str(post.id))

            if post.tags is not None:
                stored = await self._fetch_tags_for_posts([post.id])
                changes = diff_tags(
                    [tag.name for tag in stored.get(post.id, [])], post.tag_names
                )
                await self._detach_tags(post.id, changes.removed)
                await self._attach_tags(post.id, changes.added)
                if not changes.is_empty:
                    logfire.info(
                        "Post tags reconciled",
                        post_id=post.id,
                        added=changes.added,
                        removed=changes.removed,
                    )

            if post.details is not None:
                await self._write_details(post.id, post.details)

            await self.session.flush()
            logfire.info("Post updated", post_id=post.id)

    async def _ensure_author_exists(self, author_id: UserId) -> None:
        stmt = select(users_table.c.id).where(users_table.c.id == author_id)
        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is None:
            logfire.warn("Author not found", author_id=author_id)
            raise NotFoundError("User", str(author_id))

    async def _write_details(self, post_id: PostId, details: PostDetails) -> None:
        result = await self.session.execute(
            update(post_details_table)
            .where(post_details_table.c.post_id == post_id)
            .values(content=details.content)
        )
        if result.rowcount == 0:
            await self.session.execute(
                insert(post_details_table).values(
                    post_id=post_id, content=details.content
                )
            )

    async def _attach_tags(self, post_id: PostId, names: list[str]) -> None:
        """Associate tags with a post, creating or incrementing each tag."""
        for name in names:
            tag_id = await self._increment_tag(name)
            await self.session.execute(
                insert(post_tags_table).values(post_id=post_id, tag_id=tag_id)
            )

    async def _increment_tag(self, name: str) -> TagId:
        stmt = select(tags_table.c.id).where(tags_table.c.name == name)
        existing = (await self.session.execute(stmt)).scalar_one_or_none()

        if existing is None:
            result = await self.session.execute(
                insert(tags_table).values(name=name, usage_count=1)
            )
            logfire.info("Tag created", tag=name)
            return TagId(result.inserted_primary_key[0])

        await self.session.execute(
            update(tags_table)
            .where(tags_table.c.id == existing)
            .values(usage_count=tags_table.c.usage_count + 1)
        )
        return TagId(existing)

    async def _detach_tags(self, post_id: PostId, names: list[str]) -> None:
        """Remove tag associations, decrementing counts and dropping unused tags."""
        if not names:
            return

        stmt = select(tags_table.c.id, tags_table.c.name).where(
            tags_table.c.name.in_(names)
        )
        rows = (await self.session.execute(stmt)).mappings().all()
        tag_ids = [TagId(row["id"]) for row in rows]

        for row in rows:
            await self.session.execute(
                delete(post_tags_table).where(
                    post_tags_table.c.post_id == post_id,
                    post_tags_table.c.tag_id == row["id"],
                )
            )
            # Guarded decrement: a count already at zero means drift
            result = await self.session.execute(
                update(tags_table)
                .where(tags_table.c.id == row["id"], tags_table.c.usage_count > 0)
                .values(usage_count=tags_table.c.usage_count - 1)
            )
            if result.rowcount != 1:
                logfire.error(
                    "Tag usage count would drop below zero",
                    tag=row["name"],
                    post_id=post_id,
                )
                raise IntegrityError(
                    f"Usage count of tag '{row['name']}' would drop below zero"
                )

        # Tags no post references any more are removed
        result = await self.session.execute(
            delete(tags_table).where(
                tags_table.c.id.in_(tag_ids), tags_table.c.usage_count == 0
            )
        )
        if result.rowcount:
            logfire.info("Unused tags deleted", count=result.rowcount)
