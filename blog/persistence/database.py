"""Database connection, session and schema management.

Provides the async engine and session factory. PostgreSQL (asyncpg) is the
production store; SQLite (aiosqlite) is supported for local runs and tests.
"""

from typing import Any

import logfire
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import Settings
from blog.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    options: dict[str, Any] = {
        "echo": settings.debug,  # Log SQL queries in debug mode
    }
    if not settings.database.is_sqlite:
        options.update(
            pool_pre_ping=True,  # Verify connections before using
            pool_size=settings.database.pool_size,
            max_overflow=settings.database.max_overflow,
        )

    engine = create_async_engine(settings.database_url, **options)

    if settings.database.is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite leaves foreign key enforcement off unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table that does not exist yet."""
    with logfire.span("database.create_schema"):
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)


async def reset_database(engine: AsyncEngine) -> None:
    """Drop and recreate every table, leaving an empty schema."""
    with logfire.span("database.reset"):
        async with engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)
            await conn.run_sync(metadata.create_all)
        logfire.info("Database reset")
