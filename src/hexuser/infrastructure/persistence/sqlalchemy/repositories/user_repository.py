"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hexuser.domain.user import User, UserRepository
from hexuser.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Keyed reads go through ``AsyncSession.get`` and writes through
    ``AsyncSession.merge``, which inserts or updates by primary key.
    UserModel instances never leave this class.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        model = await self._session.get(UserModel, user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, user: User) -> User:
        model = await self._session.merge(self._map_to_model(user))
        await self._session.flush()
        logger.debug("Saved user: %s", model.id)

        return self._map_to_domain(model)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )
