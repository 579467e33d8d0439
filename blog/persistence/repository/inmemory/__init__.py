"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase, InMemoryRepository
from .post import InMemoryPostRepository
from .post_details import InMemoryPostDetailsRepository
from .tag import InMemoryTagRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryRepository",
    "InMemoryPostRepository",
    "InMemoryPostDetailsRepository",
    "InMemoryTagRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
