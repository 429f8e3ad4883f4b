"""Shared fixtures: in-memory database, API client, admin credentials."""

import uuid
from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from backend.app.config import settings
from backend.app.db import create_schema, get_db
from backend.app.main import app
from backend.app.models.feature import FeatureRequest
from backend.app.services import admin_gate

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "pixel-perfect"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def failing_db(client: AsyncClient) -> AsyncMock:
    """Route API requests to a session whose every query fails at the driver."""
    session = AsyncMock(spec=AsyncSession)
    session.execute.side_effect = OperationalError(
        "SELECT 1", {}, Exception("disk I/O error")
    )

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_db] = _override_get_db
    return session


@pytest.fixture
def admin_credentials(monkeypatch: pytest.MonkeyPatch) -> tuple[str, str]:
    monkeypatch.setattr(settings, "admin_username", ADMIN_USERNAME)
    monkeypatch.setattr(settings, "admin_password", ADMIN_PASSWORD)
    return ADMIN_USERNAME, ADMIN_PASSWORD


@pytest.fixture
def admin_headers(admin_credentials: tuple[str, str]) -> dict[str, str]:
    token, _ = admin_gate.issue_token()
    return {"Authorization": f"Bearer {token}"}


async def create_feature(
    db: AsyncSession,
    title: str = "Test Feature",
    description: str = "A test feature request",
    priority: str = "MEDIUM",
    status: str = "PENDING",
    votes: int = 0,
    is_hidden: bool = False,
    created_at: str | None = None,
    user_name: str | None = None,
    user_email: str | None = None,
) -> FeatureRequest:
    created_at = created_at or datetime.now(UTC).isoformat()
    feature = FeatureRequest(
        id=str(uuid.uuid4()),
        title=title,
        description=description,
        user_name=user_name,
        user_email=user_email,
        priority=priority,
        status=status,
        votes=votes,
        is_hidden=is_hidden,
        created_at=created_at,
        updated_at=created_at,
    )
    db.add(feature)
    await db.flush()
    return feature
