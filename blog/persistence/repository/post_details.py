"""SQLAlchemy implementation of PostDetails repository."""

import logfire
from sqlalchemy import select

from blog.domain.error import NotFoundError
from blog.domain.model.post_details import PostDetails
from blog.domain.repository.post_details import PostDetailsRepository
from blog.domain.value import PostId
from blog.persistence.mappers import row_to_post_details
from blog.persistence.repository.base import SqlAlchemyRepository
from blog.persistence.tables import post_details_table


class SqlAlchemyPostDetailsRepository(
    SqlAlchemyRepository, PostDetailsRepository
):
    """SQLAlchemy implementation of PostDetailsRepository."""

    async def get_by_id(self, post_id: PostId) -> PostDetails:
        """Get the details of a post."""
        stmt = select(post_details_table).where(
            post_details_table.c.post_id == post_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if row is None:
            logfire.warn("Post details not found", post_id=post_id)
            raise NotFoundError("PostDetails", str(post_id))
        return row_to_post_details(row)
