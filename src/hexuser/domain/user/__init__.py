"""User domain.

This domain handles:
- User entity (identity: id, profile: first name, last name, email)
- UserRepository port implemented by outbound persistence adapters
"""

from hexuser.domain.user.aggregates import User
from hexuser.domain.user.repositories import UserRepository

__all__ = [
    "User",
    "UserRepository",
]
