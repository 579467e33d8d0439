"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; derive changed copies with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)  # All domain models are immutable


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a timestamp to an aware UTC datetime.

    Naive values are taken to be in UTC already.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
