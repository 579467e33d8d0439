"""In-memory unit of work for testing."""

from typing import Any, Optional

from blog.domain.error import UnitOfWorkError
from blog.domain.repository import UnitOfWork

from .database import InMemoryDatabase, InMemoryRepository
from .post import InMemoryPostRepository
from .post_details import InMemoryPostDetailsRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work over an InMemoryDatabase.

    Repositories write straight into the shared database; a snapshot taken
    on entry (and after each commit) is restored on rollback.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database
        self._snapshot: Optional[dict[str, Any]] = None

    async def _begin(self) -> None:
        self._snapshot = self.database.snapshot()
        self.posts = InMemoryPostRepository(self.database)
        self.tags = InMemoryTagRepository(self.database)
        self.post_details = InMemoryPostDetailsRepository(self.database)
        self.users = InMemoryUserRepository(self.database)
        self._repositories: list[InMemoryRepository] = [
            self.posts,
            self.tags,
            self.post_details,
            self.users,
        ]

    async def _end(self) -> None:
        for repository in self._repositories:
            repository.release()
        self._snapshot = None

    async def commit(self) -> None:
        if self._snapshot is None:
            raise UnitOfWorkError("Unit of work is not active")
        self._snapshot = self.database.snapshot()

    async def rollback(self) -> None:
        if self._snapshot is None:
            raise UnitOfWorkError("Unit of work is not active")
        self.database.restore(self._snapshot)
