"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── unit/           # Fast, isolated tests (mocks, in-memory SQLite)
    ├── integration/    # API tests (SQLite) and PostgreSQL tests (Testcontainers)
    └── shared/         # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from hexuser.presentation.api.dependencies import (
    get_database_url,
    get_engine,
    get_session_maker,
)
from hexuser_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a real PostgreSQL via Docker (auto-skipped)",
    )


def _flag_enabled(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    if config.getoption("--run-all") or _flag_enabled("RUN_ALL_TESTS"):
        return

    if config.getoption("--run-integration") or _flag_enabled("RUN_INTEGRATION"):
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )

    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure every test session starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()


def _clear_database_caches() -> None:
    clear_settings_cache()
    get_session_maker.cache_clear()
    get_engine.cache_clear()
    get_database_url.cache_clear()


@pytest.fixture
def sqlite_file_database(tmp_path, monkeypatch):
    """Point settings and the shared engine at a temporary SQLite file."""
    db_path = tmp_path / "hexuser.db"
    monkeypatch.setenv("SQLITE_PATH", str(db_path))
    _clear_database_caches()
    yield db_path
    _clear_database_caches()
