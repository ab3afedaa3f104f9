"""
SimpleForm Backend: Database Connection Management
===================================================

What:  Async SQLAlchemy engine, session factory and ORM base class.
How:   `Database` owns one engine (one connection pool) for the whole
       process. It is constructed explicitly at startup and handed to the
       `ResponseStore`; nothing here is a module-level global.
Who:   Built by the application lifespan (or by tests) and used by
       `simpleform.services.response_store`.
When:  Engine is created once at startup and disposed at shutdown;
       sessions are opened per storage call.

Connection Pooling (PostgreSQL):
    pool_size / max_overflow come from settings; pool_pre_ping validates
    connections before use; pool_recycle=3600 drops hour-old connections.
    SQLite URLs skip the pool arguments, which their pools do not accept.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from simpleform.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which `Database.create_all()` uses to
    bootstrap the schema on startup.
    """
    pass


class Database:
    """
    Process-wide handle on the storage engine.

    Attributes:
        engine:          The async engine (connection pool).
        session_factory: Creates AsyncSession instances bound to the engine.
    """

    def __init__(self, url: str, **engine_kwargs: Any):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        # expire_on_commit=False: records stay readable after the session
        # closes, so services can serialize them after commit.
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a Database from application settings."""
        engine_kwargs: dict = {"echo": settings.db_echo}
        if not settings.is_sqlite:
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        return cls(settings.database_url, **engine_kwargs)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a transactional session scope.

        How it works:
            1. Creates a new session from the factory
            2. Yields it to the caller (the caller issues its statement)
            3. On success: commits
            4. On error: rolls back and re-raises
            5. Always: closes the session (returns connection to pool)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create missing tables for every model registered on `Base`."""
        # Importing the models registers them with Base.metadata.
        from simpleform.models import response  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> None:
        """Run `SELECT 1`; raises if the database is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
