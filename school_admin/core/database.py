from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from school_admin.core.config import Settings

# Create declarative base
Base = declarative_base()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the async engine; pool tuning only applies to server databases."""
    if settings.is_sqlite:
        return create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.SQL_ECHO,
        pool_pre_ping=True,        # Connection health check
        pool_size=20,              # Maximum number of connections in the pool
        max_overflow=10,           # Connections allowed beyond pool_size
        pool_timeout=30,           # Seconds to wait on pool checkout
        pool_recycle=1800,         # Recycle connections after 30 minutes
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,    # Don't expire objects after commit
        autoflush=False            # Explicit flush management
    )


# FastAPI dependency for database sessions
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides an async database session.
    Usage: db: AsyncSession = Depends(get_db)
    """
    session = request.app.state.session_factory()
    try:
        yield session
    except Exception:
        # Rollback on error
        await session.rollback()
        raise
    finally:
        # Always close the session
        await session.close()


# Database initialization functions
async def init_db(engine: AsyncEngine) -> None:
    """Initialize database tables"""
    # Import models so they are registered with the metadata
    import school_admin.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(engine: AsyncEngine) -> None:
    """Close database connections"""
    await engine.dispose()
