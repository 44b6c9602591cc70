"""FastAPI application factory.

Creates and configures the FastAPI application with the users router,
exception handlers and the database lifespan.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI

from hexuser import __version__
from hexuser.infrastructure.persistence.sqlalchemy.init_db import create_tables
from hexuser.presentation.api.dependencies import get_engine, get_session_maker
from hexuser.presentation.api.exception_handlers import setup_exception_handlers
from hexuser.presentation.api.routers import users_router
from hexuser_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the hexuser application with:
    - Console output with timestamps and module names
    - Configurable log level for hexuser modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("hexuser").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """Read and update users.

**Operations:**
- `GET /users/{id}` returns the user or an empty 404
- `PUT /users/{id}` replaces first name, last name and email

**Notes:**
- Users are never created through `PUT`; unknown IDs answer 404
- Wire fields are camelCase (`firstName`, `lastName`)
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Startup flags come from the settings the app was created with. The
    database itself is always the shared engine from ``dependencies``.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    engine = get_engine()

    if settings.create_schema_on_startup:
        await _init_database_schema()
    if settings.seed_demo_data:
        await _seed_demo_data()

    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema() -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        await create_tables(get_engine())
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


async def _seed_demo_data() -> None:
    """Insert demo users that are not present yet."""
    from hexuser_demo.seed import seed_demo_users

    async with get_session_maker()() as session:
        created = await seed_demo_users(session)
        await session.commit()

    logger.info("Demo data seeded (%d user(s) created)", created)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. Used for the API metadata
        and the startup schema and seed flags.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Hexagonal user service: read and update users.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings

    setup_exception_handlers(app)

    app.include_router(users_router, prefix="/users", tags=["Users"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app


# Application instance for uvicorn
app = create_app()
