"""Integration test fixtures for database and HTTP client operations.

Tests run against an in-memory SQLite database created from model metadata.
The single connection is shared through StaticPool so every session sees
the same data.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.marketplace import main
from src.marketplace.api.dependencies import get_db_session
from src.marketplace.core.db import engine as engine_module
from src.marketplace.core.db import get_session
from src.marketplace.main import create_app
from src.marketplace.repositories import (
    ConsultantProfileRepository,
    ProjectMatchRepository,
    ProjectRepository,
)
from src.marketplace.services import MatchService, ProjectService


@pytest.fixture
async def engine(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncEngine]:
    """Create a fresh in-memory database with all tables."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    # Code paths that call get_engine() directly (health check) use this engine too
    monkeypatch.setattr(engine_module, "_engine", test_engine)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session configured like the application's sessions.

    Tests must explicitly call `await session.commit()` to make data visible
    to other sessions.
    """
    async with get_session(engine) as session:
        yield session


@pytest.fixture
def project_service(db_session: AsyncSession) -> ProjectService:
    return ProjectService(
        ProjectRepository(db_session),
        ProjectMatchRepository(db_session),
        ConsultantProfileRepository(db_session),
        db_session,
    )


@pytest.fixture
def match_service(db_session: AsyncSession) -> MatchService:
    return MatchService(
        ProjectMatchRepository(db_session),
        ProjectRepository(db_session),
        db_session,
    )


@pytest.fixture
async def client(engine: AsyncEngine, monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncClient]:
    """Create test client whose requests each get a session on the test engine."""
    monkeypatch.setattr(main, "_health_cache", None)

    app = create_app()

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
