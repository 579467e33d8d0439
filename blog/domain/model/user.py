"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from blog.domain.model.common import DomainModel, as_utc
from blog.domain.value import UserId, UserRole


class User(DomainModel):
    """A registered user of the blog.

    Authors own posts; readers and admins share the same record shape.
    """

    id: Optional[UserId] = None  # Assigned by the store on insertion
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    registered_at: datetime
    email: str = Field(min_length=3, max_length=255)
    bio: Optional[str] = None
    role: UserRole
    is_active: bool = True

    @field_validator("registered_at")
    @classmethod
    def normalize_registered_at(cls, v: datetime) -> datetime:
        """Store registration time in UTC."""
        return as_utc(v)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
