"""Shared pytest fixtures for all test modules."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)
from tests.shared.fixtures.factories import InMemoryUserRepository, TestUserFactory

__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
    "sqlite_session_maker",
    "InMemoryUserRepository",
    "TestUserFactory",
]
