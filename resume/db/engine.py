"""Async SQLAlchemy engine and session management."""

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from resume.core.settings import DatabaseSettings
from resume.db.base import BaseEntity


class _EngineHolder:
    """Lazy singleton for the async engine and session factory."""

    engine: AsyncEngine | None = None
    factory: async_sessionmaker[AsyncSession] | None = None


_holder = _EngineHolder()


def get_engine() -> AsyncEngine:
    """Lazily create the async engine."""
    if _holder.engine is None:
        db = DatabaseSettings()
        if db.is_sqlite:
            _holder.engine = create_async_engine(db.async_url)
        else:
            _holder.engine = create_async_engine(
                db.async_url,
                pool_size=db.pool_size,
                max_overflow=db.max_overflow,
            )
    return _holder.engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Lazily create the async session factory."""
    if _holder.factory is None:
        _holder.factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _holder.factory


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency that yields an async database session."""
    factory = get_session_factory()
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing resume tables."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseEntity.metadata.create_all)


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    if _holder.engine is not None:
        await _holder.engine.dispose()
    _holder.engine = None
    _holder.factory = None
