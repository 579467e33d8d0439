"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.user import User
from blog.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Args:
            user_id: The user's identifier

        Returns:
            The user

        Raises:
            NotFoundError: If no user has this ID
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> UserId:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The user's ID (generated when ``user.id`` is None)
        """
        pass
