"""Unit tests for demo data seeding."""

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from hexuser.infrastructure.persistence.sqlalchemy import (
    UserModel,
    UserRepositorySQLAlchemy,
)
from hexuser.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from hexuser_demo.data import DEMO_USERS
from hexuser_demo.seed import seed_demo_users


@pytest_asyncio.fixture
async def empty_session(sqlite_engine, sqlite_session_maker):
    """Session on a database with the schema but without any rows."""
    await drop_tables(sqlite_engine)
    await create_tables(sqlite_engine)

    async with sqlite_session_maker() as session:
        yield session


async def _count(session) -> int:
    result = await session.execute(select(func.count()).select_from(UserModel))
    return result.scalar_one()


class TestSeedDemoUsers:
    """Tests for seed_demo_users."""

    @pytest.mark.asyncio
    async def test_inserts_john_doe(self, empty_session):
        created = await seed_demo_users(empty_session)
        await empty_session.commit()

        john = await UserRepositorySQLAlchemy(empty_session).find_by_id(1)

        assert created == len(DEMO_USERS)
        assert john is not None
        assert (john.first_name, john.last_name, john.email) == (
            "John",
            "Doe",
            "john@example.com",
        )

    @pytest.mark.asyncio
    async def test_is_idempotent(self, empty_session):
        await seed_demo_users(empty_session)
        await empty_session.commit()

        created = await seed_demo_users(empty_session)

        assert created == 0
        assert await _count(empty_session) == len(DEMO_USERS)

    @pytest.mark.asyncio
    async def test_leaves_existing_rows_untouched(self, empty_session):
        repo = UserRepositorySQLAlchemy(empty_session)
        await seed_demo_users(empty_session)
        john = await repo.find_by_id(1)
        john.overwrite_profile("Changed", "Name", "changed@example.com")
        await repo.save(john)
        await empty_session.commit()

        await seed_demo_users(empty_session)

        stored = await repo.find_by_id(1)
        assert stored.first_name == "Changed"
