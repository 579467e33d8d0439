"""Base class for SQLAlchemy repositories."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import UnitOfWorkError


class SqlAlchemyRepository:
    """Repository bound to the session of one unit of work block.

    The unit of work releases the repository when its block exits; any
    later call raises instead of opening a transaction nobody commits.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self._session: Optional[AsyncSession] = session

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise UnitOfWorkError("Unit of work is not active")
        return self._session

    def release(self) -> None:
        """Detach the repository from its session."""
        self._session = None
