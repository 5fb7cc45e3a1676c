"""
Pytest configuration and fixtures.

Every API test gets its own in-memory SQLite database, a pinned
analytics clock and an authenticated user, so nothing touches
Postgres or the hosted vendors.
"""
import os

# Must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.deps import get_clock
from app.core import database
from app.core.auth import get_current_user
from app.main import app
from app.models import WorkoutLog
from app.services.external import AuthenticatedUser
from helpers import FIXED_NOW


@pytest.fixture
def test_user() -> AuthenticatedUser:
    return AuthenticatedUser(
        id="user-123",
        email="sam@example.com",
        first_name="Sam",
        last_name="Lee",
    )


@pytest.fixture
def client(monkeypatch, test_user):
    """TestClient bound to a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(database, "async_session_maker", session_maker)

    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    app.dependency_overrides[get_current_user] = lambda: test_user

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seed_workouts(client):
    """
    Insert workout logs directly, with explicit created_at values.

    Runs on the TestClient's event loop so the in-memory connection
    is shared with request handlers.
    """
    def _seed(*rows: dict) -> list[str]:
        async def _insert() -> list[str]:
            async with database.async_session_maker() as session:
                logs = [WorkoutLog(**row) for row in rows]
                session.add_all(logs)
                await session.commit()
                return [str(log.id) for log in logs]

        return client.portal.call(_insert)

    return _seed
