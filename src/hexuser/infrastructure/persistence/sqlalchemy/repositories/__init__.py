"""SQLAlchemy repository implementations."""

from hexuser.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from hexuser.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
