"""Inbound port for user operations.

Presentation adapters depend on this interface only, so the orchestration
behind it can be swapped (e.g. with a mock in router tests).
"""

from abc import ABC, abstractmethod
from typing import Optional

from hexuser.domain.user import User


class UserUseCase(ABC):
    """Use cases offered on the User entity."""

    @abstractmethod
    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with the given ID, or None if there is none."""

    @abstractmethod
    async def update_user(self, user_id: int, user: User) -> Optional[User]:
        """Overwrite the mutable fields of an existing user.

        Returns the persisted user, or None if no user has the given ID.
        Never creates a new user.
        """
