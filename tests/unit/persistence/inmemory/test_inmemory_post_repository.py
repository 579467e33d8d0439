"""Unit tests for the in-memory post repository.

These run against the same fixture data as the SQL integration tests so the
in-memory store stays a faithful stand-in.
"""

import pytest

from blog.domain.error import IntegrityError, NotFoundError, ValidationError
from blog.domain.model import Tag
from blog.domain.repository import UnitOfWork
from blog.domain.value import PostId, UserId
from blog.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import SEEDED_TAGS, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestInMemoryPostRepository:
    """Tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_add_then_get_full_post(self, unit_env):
        """A stored post comes back fully hydrated."""
        # Arrange
        uow = await unit_env.get(UnitOfWork)
        post = make_post()

        # Act
        async with uow:
            post_id = await uow.posts.add(post)
            stored = await uow.posts.get_full_post_by_id(post_id)

        # Assert
        assert stored.id == post_id
        assert stored.title == post.title
        assert stored.tag_names == ["programming", "C#"]
        assert stored.details.content == "<h1>Post headline!</h1>"
        assert stored.details.post_id == post_id
        assert stored.author.last_name == "Tesla"

    @pytest.mark.asyncio
    async def test_get_by_id_is_shallow(self, unit_env):
        uow = await unit_env.get(UnitOfWork)

        async with uow:
            post = await uow.posts.get_by_id(PostId(1))

        assert post.tags is None
        assert post.details is None
        assert post.author is None
        assert post.author_id == UserId(2)

    @pytest.mark.asyncio
    async def test_add_updates_tag_counts(self, unit_env):
        uow = await unit_env.get(UnitOfWork)

        async with uow:
            await uow.posts.add(make_post())
            tags = {tag.name: tag for tag in await uow.tags.get_all()}

        assert len(tags) == 5
        assert tags["programming"].usage_count == 2
        assert tags["C#"].usage_count == 1

    @pytest.mark.asyncio
    async def test_removing_last_use_deletes_tag(self, unit_env):
        """Dropping a tag used by one post removes it from the tag set."""
        # Arrange
        uow = await unit_env.get(UnitOfWork)
        async with uow:
            post = await uow.posts.get_full_post_by_id(PostId(1))

        # Act
        async with uow:
            await uow.posts.update(post.model_copy(update={"tags": post.tags[1:]}))

        # Assert
        async with uow:
            stored = await uow.posts.get_full_post_by_id(PostId(1))
            agile = await uow.tags.find_by_name("agile")

        assert stored.tag_names == SEEDED_TAGS[1:]
        assert all(tag.usage_count == 1 for tag in stored.tags)
        assert agile is None

    @pytest.mark.asyncio
    async def test_update_never_changes_author(self, unit_env):
        uow = await unit_env.get(UnitOfWork)
        async with uow:
            post = await uow.posts.get_full_post_by_id(PostId(1))
            tesla = await uow.users.get_by_id(UserId(1))

        async with uow:
            await uow.posts.update(post.model_copy(update={"author": tesla}))
            stored = await uow.posts.get_full_post_by_id(PostId(1))

        assert stored.author.last_name == "Einstein"

    @pytest.mark.asyncio
    async def test_update_without_tags_keeps_associations(self, unit_env):
        """A shallow post (tags None) leaves the stored tags alone."""
        uow = await unit_env.get(UnitOfWork)
        async with uow:
            post = await uow.posts.get_by_id(PostId(1))
            await uow.posts.update(post.model_copy(update={"title": "Renamed"}))
            stored = await uow.posts.get_full_post_by_id(PostId(1))

        assert stored.title == "Renamed"
        assert stored.tag_names == SEEDED_TAGS

    @pytest.mark.asyncio
    async def test_add_requires_details(self, unit_env):
        uow = await unit_env.get(UnitOfWork)

        with pytest.raises(ValidationError):
            async with uow:
                await uow.posts.add(make_post().model_copy(update={"details": None}))

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        uow = await unit_env.get(UnitOfWork)

        with pytest.raises(NotFoundError):
            async with uow:
                await uow.posts.get_full_post_by_id(PostId(999))

    @pytest.mark.asyncio
    async def test_count_drift_raises_integrity_error(self, unit_env):
        """Detaching a tag whose count is already zero is refused."""
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        database.tags["agile"] = Tag(
            id=database.tags["agile"].id, name="agile", usage_count=0
        )
        uow = await unit_env.get(UnitOfWork)
        async with uow:
            post = await uow.posts.get_full_post_by_id(PostId(1))

        # Act / Assert
        with pytest.raises(IntegrityError):
            async with uow:
                await uow.posts.update(post.model_copy(update={"tags": []}))

        assert len(database.post_tags) == 4
