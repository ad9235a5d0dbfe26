"""Pytest configuration for Users service tests."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Add project root to path for imports
project_root = Path(__file__).resolve().parents[3]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from apps.users.domain.entities.user import User  # noqa: E402
from apps.users.domain.value_objects.user_id import UserId  # noqa: E402
from apps.users.infrastructure.persistence_postgres.base import Base  # noqa: E402

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def make_user():
    """Factory fixture for creating User aggregates."""

    def _create(
        user_id: str = "ab12cd3407",
        nickname: str | None = "old",
        avatar: str | None = "avatar.png",
    ) -> User:
        return User(id_=UserId(user_id), nickname=nickname, avatar=avatar)

    return _create


@pytest_asyncio.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    """In-memory SQLite 엔진 (연결 하나를 공유해 스키마 유지)."""
    engine = create_async_engine(
        SQLITE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session
