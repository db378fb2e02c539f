"""Pytest configuration shared by all test suites.

Environment defaults are set before any ``src`` import because
``src.core.config.settings`` is built at import time:
1. DATABASE_URL points at in-memory SQLite (aiosqlite)
2. ENVIRONMENT is "testing" (JSON logs)

Fixtures:
- mock_logger: LoggerProtocol double for handler unit tests
- test_database: fresh in-memory database with all tables, per test
- file_database: fresh file-backed SQLite database, for tests that need
  separate connections (concurrent sessions, locking)
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("API_BASE_URL", "https://api.voiceflex.local")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.domain.protocols.logger_protocol import LoggerProtocol  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through FastAPI TestClient")
    config.addinivalue_line("markers", "smoke: End-to-end smoke tests")


@pytest.fixture
def mock_logger() -> MagicMock:
    """LoggerProtocol double (records calls, prints nothing)."""
    return MagicMock(spec=LoggerProtocol)


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database for each integration test.

    Every test gets its own engine (StaticPool, one shared connection), so
    data never leaks between tests. Tables are created from the ORM models.
    """
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.create_all()

    yield database

    await database.close()


@pytest_asyncio.fixture
async def file_database(tmp_path):
    """Provide a file-backed database whose sessions use separate connections."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'voiceflex.db'}")
    await database.create_all()

    yield database

    await database.close()
