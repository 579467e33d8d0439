"""Unit of work interface."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional

import logfire

from blog.domain.error import UnitOfWorkError
from blog.domain.repository.post import PostRepository
from blog.domain.repository.post_details import PostDetailsRepository
from blog.domain.repository.tag import TagRepository
from blog.domain.repository.user import UserRepository


class UnitOfWork(ABC):
    """Binds the repositories to one transaction.

    Use as an async context manager. Leaving the block normally commits;
    leaving it with an exception rolls back and re-raises. The repositories
    are only usable inside the block; once it exits they raise
    ``UnitOfWorkError``, even through a reference kept from inside. The same
    instance may be entered again once the previous block has exited, but
    never while it is active.

        async with unit_of_work as uow:
            post_id = await uow.posts.add(post)
    """

    posts: PostRepository
    tags: TagRepository
    post_details: PostDetailsRepository
    users: UserRepository

    _active: bool = False

    @property
    def is_active(self) -> bool:
        return self._active

    async def __aenter__(self) -> "UnitOfWork":
        if self._active:
            raise UnitOfWorkError("Unit of work is already active")
        await self._begin()
        self._active = True
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        try:
            if exc_type is None:
                try:
                    await self.commit()
                except Exception as e:
                    logfire.warn("Commit failed, rolling back", error=str(e))
                    await self.rollback()
                    raise
            else:
                logfire.warn(
                    "Unit of work rolled back",
                    error=str(exc),
                    error_type=exc_type.__name__,
                )
                await self.rollback()
        finally:
            self._active = False
            await self._end()

    @abstractmethod
    async def _begin(self) -> None:
        """Open the transaction and bind the repositories."""
        pass

    @abstractmethod
    async def _end(self) -> None:
        """Release whatever ``_begin`` acquired."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the work done so far."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard the work done since the last commit."""
        pass
