"""SQLAlchemy models."""

from hexuser.infrastructure.persistence.sqlalchemy.models.base import Base
from hexuser.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "UserModel",
]
