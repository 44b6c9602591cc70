"""
Pytest configuration for integration tests.

Re-exports the shared database fixtures so test modules can request them
by name.
"""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
    "sqlite_session_maker",
]
