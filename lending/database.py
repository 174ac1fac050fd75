"""Database configuration and session management."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from lending.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def initialize_database(settings: Settings) -> None:
    """Initialize database engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    if settings.DATABASE_URL.startswith("sqlite"):
        if ":memory:" in settings.DATABASE_URL:
            # Every connection to an in-memory database is a new database
            _engine = create_async_engine(settings.DATABASE_URL, poolclass=StaticPool)
        else:
            _engine = create_async_engine(settings.DATABASE_URL)
    else:
        _engine = create_async_engine(
            settings.DATABASE_URL,
            pool_size=20,
            max_overflow=30,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=3600,  # Recycle connections after 1 hour
        )

    # Aggregates stay readable after commit; the change tracker owns their state
    _session_factory = async_sessionmaker(_engine, autoflush=False, expire_on_commit=False)


def get_engine() -> AsyncEngine:
    """Get the singleton database engine."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


async def create_tables() -> None:
    """Create all tables that do not exist yet."""
    # Register the ORM tables on Base.metadata
    import lending.models  # noqa: F401, PLC0415

    async with get_engine().begin() as connection:
        await connection.run_sync(Base.metadata.create_all)


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> async_sessionmaker[AsyncSession]:
    """Get session factory (returns singleton)."""
    if _session_factory is None:
        initialize_database(settings)

    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")

    return _session_factory


async def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def get_db(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with session_factory() as db:
        yield db


# Type alias for database dependency
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
