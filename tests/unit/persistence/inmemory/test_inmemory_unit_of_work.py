"""Unit tests for the unit of work contract on the in-memory store."""

import pytest

from blog.domain.error import NotFoundError, UnitOfWorkError
from blog.domain.repository import UnitOfWork
from blog.domain.value import PostId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestInMemoryUnitOfWork:
    """Tests for InMemoryUnitOfWork."""

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, unit_env):
        """Work done inside a failing block is discarded."""
        # Arrange
        uow = await unit_env.get(UnitOfWork)

        # Act
        with pytest.raises(RuntimeError):
            async with uow:
                await uow.posts.add(make_post())
                raise RuntimeError("boom")

        # Assert
        async with uow:
            tags = await uow.tags.get_all()
            with pytest.raises(NotFoundError):
                await uow.posts.get_by_id(PostId(3))

        assert len(tags) == 4

    @pytest.mark.asyncio
    async def test_normal_exit_commits(self, unit_env):
        uow = await unit_env.get(UnitOfWork)

        async with uow:
            post_id = await uow.posts.add(make_post())

        async with uow:
            post = await uow.posts.get_by_id(post_id)

        assert post.id == post_id

    @pytest.mark.asyncio
    async def test_nested_entry_is_rejected(self, unit_env):
        uow = await unit_env.get(UnitOfWork)

        async with uow:
            with pytest.raises(UnitOfWorkError):
                async with uow:
                    pass
            assert uow.is_active

        assert not uow.is_active

    @pytest.mark.asyncio
    async def test_commit_outside_block_is_rejected(self, unit_env):
        uow = await unit_env.get(UnitOfWork)

        with pytest.raises(UnitOfWorkError):
            await uow.commit()

    @pytest.mark.asyncio
    async def test_repositories_are_sealed_after_exit(self, unit_env):
        """A repository kept from inside the block cannot write afterwards."""
        # Arrange
        uow = await unit_env.get(UnitOfWork)
        async with uow:
            posts = uow.posts

        # Act / Assert
        with pytest.raises(UnitOfWorkError):
            await posts.add(make_post())
        with pytest.raises(UnitOfWorkError):
            await uow.tags.get_all()

        async with uow:
            with pytest.raises(NotFoundError):
                await uow.posts.get_by_id(PostId(3))
