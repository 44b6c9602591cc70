"""Demo data seeding for hexuser.

Inserts the rows from ``hexuser_demo.data`` that are not present yet.
Existing users are left untouched, so seeding is safe to repeat.

Usage:
    hexuser db seed
    # or
    python -m hexuser_demo.seed
"""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncSession

from hexuser.domain.user import User
from hexuser.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from hexuser.infrastructure.persistence.sqlalchemy.init_db import create_tables
from hexuser_demo.data import DEMO_USERS

logger = logging.getLogger(__name__)


async def seed_demo_users(session: AsyncSession) -> int:
    """Insert missing demo users and return how many were created.

    The caller owns the transaction and must commit.
    """
    user_repo = UserRepositorySQLAlchemy(session)
    created = 0

    for demo in DEMO_USERS:
        if await user_repo.find_by_id(demo.id) is not None:
            logger.debug("Demo user %s already exists, skipping", demo.id)
            continue

        await user_repo.save(
            User.reconstitute(
                id=demo.id,
                first_name=demo.first_name,
                last_name=demo.last_name,
                email=demo.email,
            )
        )
        created += 1
        logger.info("Created demo user %s (%s)", demo.id, demo.email)

    return created


async def _run() -> int:
    # Imported here so the API module (and its settings) only load when seeding
    from hexuser.presentation.api.dependencies import get_engine, get_session_maker

    engine = get_engine()
    await create_tables(engine)

    async with get_session_maker()() as session:
        created = await seed_demo_users(session)
        await session.commit()

    await engine.dispose()
    return created


def main() -> None:
    """Seed demo data into the configured database."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    try:
        created = asyncio.run(_run())
    except Exception:
        logger.exception("Seeding demo data failed")
        sys.exit(1)

    logger.info("Seeding finished: %d user(s) created", created)


if __name__ == "__main__":
    main()
