"""Application layer ports (aka interfaces)."""

from hexuser.application.ports.user_use_case import UserUseCase

__all__ = [
    "UserUseCase",
]
