"""SQLAlchemy implementation of Tag repository."""

from typing import Optional

from sqlalchemy import select

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId
from blog.persistence.mappers import row_to_tag
from blog.persistence.repository.base import SqlAlchemyRepository
from blog.persistence.tables import post_tags_table, tags_table


class SqlAlchemyTagRepository(SqlAlchemyRepository, TagRepository):
    """SQLAlchemy implementation of TagRepository."""

    async def get_all(self) -> list[Tag]:
        """Get every known tag, ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_tag(row) for row in result.mappings().all()]

    async def get_tags_by_post_id(self, post_id: PostId) -> list[Tag]:
        """Get the tags associated with a post, in association order."""
        stmt = (
            select(tags_table)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id == post_id)
            .order_by(post_tags_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row) for row in result.mappings().all()]

    async def find_by_name(self, name: str) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_tag(row) if row else None
