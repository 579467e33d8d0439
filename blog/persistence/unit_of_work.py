"""SQLAlchemy unit of work."""

from typing import Optional

import logfire
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog.domain.error import UnitOfWorkError
from blog.domain.repository import UnitOfWork
from blog.persistence.repository import (
    SqlAlchemyPostDetailsRepository,
    SqlAlchemyPostRepository,
    SqlAlchemyRepository,
    SqlAlchemyTagRepository,
    SqlAlchemyUserRepository,
)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work backed by one AsyncSession per ``async with`` block.

    Every repository shares the session, so all their statements run in the
    session's transaction and are committed or rolled back together.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize unit of work.

        Args:
            session_factory: Factory for creating database sessions
        """
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None

    async def _begin(self) -> None:
        self.session = self.session_factory()
        self.posts = SqlAlchemyPostRepository(self.session)
        self.tags = SqlAlchemyTagRepository(self.session)
        self.post_details = SqlAlchemyPostDetailsRepository(self.session)
        self.users = SqlAlchemyUserRepository(self.session)
        self._repositories: list[SqlAlchemyRepository] = [
            self.posts,
            self.tags,
            self.post_details,
            self.users,
        ]

    async def _end(self) -> None:
        for repository in self._repositories:
            repository.release()
        if self.session is not None:
            await self.session.close()
            self.session = None

    def _require_session(self) -> AsyncSession:
        if self.session is None:
            raise UnitOfWorkError("Unit of work is not active")
        return self.session

    async def commit(self) -> None:
        """Commit the session's transaction."""
        await self._require_session().commit()
        logfire.info("Session committed")

    async def rollback(self) -> None:
        """Roll back the session's transaction."""
        await self._require_session().rollback()
        logfire.info("Session rolled back")
