"""User service implementing the user use cases."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from hexuser.application.ports import UserUseCase
from hexuser.domain.user import User, UserRepository

if TYPE_CHECKING:
    from hexuser.application.factories import RepositoryFactory


class UserService(UserUseCase):
    """
    Application service for reading and updating users.

    Only talks to the UserRepository port; which adapter backs it is decided
    by whoever constructs the service.

    The lookup in ``update_user`` and the following save are two separate
    storage calls. Concurrent updates of the same user are last-writer-wins.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        logger: Optional[logging.Logger] = None,
    ):
        self._user_repo = user_repository
        self._logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UserService:
        return cls(user_repository=factory.user_repository())

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        self._logger.info("Fetching user with id: %s", user_id)
        user = await self._user_repo.find_by_id(user_id)

        if user is not None:
            self._logger.info("User found: %s", user)

        return user

    async def update_user(self, user_id: int, user: User) -> Optional[User]:
        self._logger.info("Updating user with id: %s", user_id)
        existing = await self._user_repo.find_by_id(user_id)

        if existing is None:
            return None

        existing.overwrite_profile(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )
        updated = await self._user_repo.save(existing)

        self._logger.info("User updated: %s", updated)
        return updated
