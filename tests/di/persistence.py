"""Mock persistence providers for testing."""

from dishka import Scope, provide

from blog.domain.repository import UnitOfWork
from blog.persistence.repository.inmemory import InMemoryDatabase, InMemoryUnitOfWork
from blog.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database is APP-scoped so a test can seed it and then read it back
    through the unit of work; each test builds its own container, so nothing
    leaks between tests.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory tables."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, database: InMemoryDatabase) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork(database)
