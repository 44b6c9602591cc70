"""API request/response schemas."""

from hexuser.presentation.api.schemas.users import UserResponse, UserUpdateRequest

__all__ = [
    "UserResponse",
    "UserUpdateRequest",
]
