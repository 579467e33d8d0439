"""SQLAlchemy repository implementations."""

from blog.persistence.repository.base import SqlAlchemyRepository
from blog.persistence.repository.post import SqlAlchemyPostRepository
from blog.persistence.repository.post_details import SqlAlchemyPostDetailsRepository
from blog.persistence.repository.tag import SqlAlchemyTagRepository
from blog.persistence.repository.user import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyPostRepository",
    "SqlAlchemyPostDetailsRepository",
    "SqlAlchemyTagRepository",
]
