"""In-memory user repository for testing."""

from typing import Optional

from blog.domain.error import NotFoundError
from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import UserId

from .database import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository, UserRepository):
    """In-memory implementation of UserRepository for testing."""

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID."""
        user = self.database.users.get(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self.database.users.values():
            if user.email == email:
                return user
        return None

    async def add(self, user: User) -> UserId:
        """Insert a new user."""
        user_id = user.id or UserId(max(self.database.users, default=0) + 1)
        self.database.users[user_id] = user.model_copy(update={"id": user_id})
        return user_id
