"""Integration tests for SqlAlchemyTagRepository."""

import pytest

from blog.domain.repository import UnitOfWork
from blog.domain.value import PostId
from tests.conftest import SEEDED_TAGS
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestTagRepositoryIntegration:
    """Integration tests for SqlAlchemyTagRepository."""

    @pytest.mark.asyncio
    async def test_get_all(self, integration_env):
        uow = await integration_env.get(UnitOfWork)

        async with uow:
            tags = await uow.tags.get_all()

        assert [tag.name for tag in tags] == SEEDED_TAGS
        assert all(tag.usage_count == 1 for tag in tags)

    @pytest.mark.asyncio
    async def test_get_tags_by_post_id(self, integration_env):
        uow = await integration_env.get(UnitOfWork)

        async with uow:
            tags = await uow.tags.get_tags_by_post_id(PostId(1))
            untagged = await uow.tags.get_tags_by_post_id(PostId(2))

        assert [tag.name for tag in tags] == SEEDED_TAGS
        assert untagged == []

    @pytest.mark.asyncio
    async def test_unknown_post_has_no_tags(self, integration_env):
        uow = await integration_env.get(UnitOfWork)

        async with uow:
            tags = await uow.tags.get_tags_by_post_id(PostId(999))

        assert tags == []

    @pytest.mark.asyncio
    async def test_find_by_name(self, integration_env):
        uow = await integration_env.get(UnitOfWork)

        async with uow:
            tag = await uow.tags.find_by_name("vue.js")
            missing = await uow.tags.find_by_name("cobol")

        assert tag is not None
        assert tag.usage_count == 1
        assert missing is None
