"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hexuser.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository port for User entities.

    Implemented once per storage backend and injected into the application
    layer. Absence is a normal outcome and is reported as ``None``.
    """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user by primary key and return the stored state."""
