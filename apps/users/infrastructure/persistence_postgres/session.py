"""Database session management for Users service."""

from collections.abc import AsyncIterator
from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.users.infrastructure.persistence_postgres.base import Base
from apps.users.setup.config import get_settings


@lru_cache
def get_engine() -> AsyncEngine:
    """설정 기반 엔진 (최초 사용 시 생성)."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Yield an async database session."""
    async with get_session_factory()() as session:
        yield session


async def create_schema(engine: AsyncEngine) -> None:
    """테이블 생성 (존재하면 건너뜀)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
