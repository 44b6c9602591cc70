"""Pytest fixtures for API tests.

The app runs in-process through ``httpx.ASGITransport`` on the same event
loop as the test, with the request session bound to the in-memory SQLite
engine from the shared fixtures (John Doe seeded as id 1).
"""

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from hexuser.presentation.api.app import create_app
from hexuser.presentation.api.dependencies import get_db_session
from hexuser_config.settings import Settings


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and no startup schema work."""
    return Settings(
        sqlite_path=":memory:",
        api_debug=True,
        create_schema_on_startup=False,
        seed_demo_data=False,
    )


@pytest.fixture
def test_app(api_settings, sqlite_session_maker) -> FastAPI:
    """Create the app with the database session dependency overridden."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with sqlite_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest_asyncio.fixture
async def client(test_app):
    """HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def update_body() -> dict:
    return {
        "firstName": "JohnUpdated",
        "lastName": "DoeUpdated",
        "email": "john.updated@example.com",
    }
