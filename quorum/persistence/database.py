"""Engine, sessions and schema for the PostgreSQL store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quorum.config import Settings
from quorum.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine described by ``settings.database``.

    Args:
        settings: Application settings

    Returns:
        Async engine with a pre-pinged connection pool
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Repositories issue Core statements and flush explicitly, so autoflush is
    off and nothing is expired on commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables, enums and constraints. Idempotent."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
