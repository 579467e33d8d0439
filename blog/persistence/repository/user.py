"""SQLAlchemy implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import insert, select

from blog.domain.error import NotFoundError
from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.repository.base import SqlAlchemyRepository
from blog.persistence.tables import users_table


class SqlAlchemyUserRepository(SqlAlchemyRepository, UserRepository):
    """SQLAlchemy implementation of UserRepository."""

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            The user

        Raises:
            NotFoundError: If no user has this ID
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if row is None:
            logfire.warn("User not found", user_id=user_id)
            raise NotFoundError("User", str(user_id))
        return row_to_user(row)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def add(self, user: User) -> UserId:
        """Insert a new user.

        Args:
            user: User to insert

        Returns:
            The stored user's ID
        """
        result = await self.session.execute(
            insert(users_table).values(**user_to_dict(user))
        )
        user_id = UserId(result.inserted_primary_key[0])
        await self.session.flush()
        logfire.info("User added", user_id=user_id)
        return user_id
