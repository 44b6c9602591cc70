"""SQLAlchemy implementation for hexuser persistence.

Provides:
- Base: Declarative base for all models
- UserModel: SQLAlchemy model for the users table
- UserRepositorySQLAlchemy: UserRepository port implementation
- SQLAlchemyRepositoryFactory: RepositoryFactory implementation
"""

from hexuser.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from hexuser.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "SQLAlchemyRepositoryFactory",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
