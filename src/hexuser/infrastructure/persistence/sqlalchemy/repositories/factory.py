"""SQLAlchemy repository factory."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from hexuser.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._user_repo: UserRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo
