"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.config import Settings
from contacts_api.contacts.models import Contact
from contacts_api.main import create_app
from contacts_api.shared.database import DatabaseManager


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings backed by an in-memory database."""
    return Settings(
        app_env="dev",
        debug=False,
        database_url="sqlite+aiosqlite:///:memory:",
        create_tables=False,
        cors_origins="*",
    )


@pytest_asyncio.fixture
async def db_manager(test_settings: Settings) -> AsyncGenerator[DatabaseManager, None]:
    """Database manager with the schema created."""
    manager = DatabaseManager(test_settings)
    await manager.create_all()

    yield manager

    await manager.close()


@pytest_asyncio.fixture
async def db_session(db_manager: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with db_manager.session_factory() as session:
        yield session


@pytest.fixture
def app(test_settings: Settings, db_manager: DatabaseManager) -> FastAPI:
    """Application wired to the test database."""
    application = create_app(test_settings)
    application.state.db_manager = db_manager
    return application


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def seed_contacts(db_manager: DatabaseManager) -> Callable[[int], Awaitable[list[Contact]]]:
    """Insert N contacts in their own committed session, in id order."""

    async def _seed(count: int) -> list[Contact]:
        contacts = [
            Contact(name=f"Contact {i}", email=f"contact{i}@example.com")
            for i in range(1, count + 1)
        ]
        async with db_manager.session() as session:
            for contact in contacts:
                session.add(contact)
                await session.flush()
        return contacts

    return _seed
