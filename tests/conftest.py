"""
Test configuration and fixtures for the timezone service.

This module provides:
- An in-memory SQLite store per test
- A catalog built from the static manifest
- A FastAPI app and async HTTP client wired to that catalog
"""

import os

os.environ["ENVIRONMENT"] = "testing"

from typing import Any, AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from main import create_app  # noqa: E402
from shared.constants import TIMEZONE_MANIFEST  # noqa: E402
from shared.db.sessions.database import (  # noqa: E402
    create_async_db_engine,
    create_session_factory,
    init_db,
)
from tests.test_config import AppTestSettings, get_test_settings  # noqa: E402
from timezone_service.services.catalog import TimezoneCatalog  # noqa: E402
from timezone_service.services.store import TimezoneStore  # noqa: E402


@pytest.fixture
def test_settings() -> AppTestSettings:
    """Provide test settings."""
    return get_test_settings()


@pytest_asyncio.fixture(scope="function")
async def test_engine(
    test_settings: AppTestSettings,
) -> AsyncGenerator[AsyncEngine, None]:
    """In-memory database with all tables created."""
    engine = create_async_db_engine(test_settings.database_url)
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session_factory(
    test_engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(test_engine)


@pytest_asyncio.fixture(scope="function")
async def timezone_store(
    test_session_factory: async_sessionmaker[AsyncSession],
) -> TimezoneStore:
    return TimezoneStore(test_session_factory)


@pytest.fixture
def manifest_catalog() -> TimezoneCatalog:
    return TimezoneCatalog.from_manifest(TIMEZONE_MANIFEST)


@pytest.fixture
def test_app(
    test_settings: AppTestSettings, manifest_catalog: TimezoneCatalog
) -> FastAPI:
    """App with the catalog attached directly, skipping the DB lifespan."""
    app = create_app(test_settings)
    app.state.timezone_catalog = manifest_catalog
    return app


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://testserver", timeout=30.0
    ) as client:
        yield client


@pytest.fixture
def conversion_payload() -> dict[str, Any]:
    return {
        "fromTimezone": "Asia/Karachi",
        "toTimezone": "America/Los_Angeles",
        "dateTime": "2024-01-01T00:00:00Z",
    }
