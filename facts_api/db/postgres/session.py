"""SQLAlchemy database session management for the row store.

The engine and session factory are created once per process and shared by
every request; repositories receive `get_db_session` as an injected callable.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from facts_api.core.settings import get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


# Global engine and session factory
_engine: AsyncEngine | None = None
_async_session_maker: async_sessionmaker[AsyncSession] | None = None


def init_db_session() -> None:
    """Initialize the database engine and session factory."""
    global _engine, _async_session_maker

    if _async_session_maker is not None:
        return  # Already initialized

    settings = get_settings()

    _engine = create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database_pool_size,
    )

    _async_session_maker = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info("Database session factory initialized")


async def close_db_session() -> None:
    """Dispose the engine and drop the session factory."""
    global _engine, _async_session_maker

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_maker = None


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session."""
    if _async_session_maker is None:
        init_db_session()

    if _async_session_maker is None:
        raise RuntimeError("Failed to initialize database session")

    async with _async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
