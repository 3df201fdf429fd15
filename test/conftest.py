"""
Pytest configuration and fixtures for the magician site tests
"""

import os
import sys
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["DEBUG"] = "false"

from app.database import Base, get_db  # noqa: E402
from app.dependencies import get_nonce_manager, get_option_store  # noqa: E402
from app.plugins.loader import initialize_plugins  # noqa: E402
from app.plugins.registry import plugin_registry  # noqa: E402
from app.services.option_service import OptionStore  # noqa: E402
from app.utils.nonce import NonceManager  # noqa: E402
from main import app  # noqa: E402

TEST_SECRET_KEY = "test-secret-key"


@pytest.fixture(scope="function")
async def test_engine(tmp_path):
    """
    Create a fresh SQLite database file for each test function that needs it.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_engine) -> async_sessionmaker:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for tests that need it."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def option_store(tmp_path) -> OptionStore:
    return OptionStore(tmp_path / "options.json")


@pytest.fixture
def nonce_manager() -> NonceManager:
    return NonceManager(secret_key=TEST_SECRET_KEY, max_age=3600)


@pytest.fixture
async def magician_plugin():
    """Register the magician plugin for the duration of a test."""
    await initialize_plugins(plugin_registry, {"magicians": {"enabled": True}})
    yield plugin_registry.get("magicians")
    await plugin_registry.unregister("magicians")


@pytest.fixture
async def client(session_maker, option_store, nonce_manager, magician_plugin) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app, wired to the test database and option file."""

    async def _override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_option_store] = lambda: option_store
    app.dependency_overrides[get_nonce_manager] = lambda: nonce_manager

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
