"""FastAPI dependency injection for the hexuser API.

Provides dependencies for:
- Database engine and sessions
- Repository factory bound to the request session
- The user use case
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hexuser.application.ports import UserUseCase
from hexuser.application.services import UserService
from hexuser.infrastructure.persistence.sqlalchemy import SQLAlchemyRepositoryFactory
from hexuser_config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Repository Factory & Use Cases
# -----------------------------------------------------------------------------


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Get repository factory bound to the request session."""
    return SQLAlchemyRepositoryFactory(session=session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


async def get_user_use_case(factory: RepoFactory) -> UserUseCase:
    """Get the user use case wired to the SQLAlchemy user repository."""
    return UserService.from_factory(factory)


# Type alias for injected user use case
UserUseCaseDep = Annotated[UserUseCase, Depends(get_user_use_case)]
