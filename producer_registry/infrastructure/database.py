"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - One manager per application, created in the lifespan and stored on app.state
    - Every request gets its own AsyncSession, closed when the request ends
    - Every session auto-rolls-back on exception (no partial commits leak)
    - SQLAlchemy exceptions become DatabaseError (core/errors.py) where statements run:
      ProducerStore._run for requests, create_tables for startup

Design Decisions:
    - No module-level engine: handlers reach the manager through get_db, which
      reads it from the application state
    - expire_on_commit=False: returned rows stay readable after commit
    - Pool sizing only applies to server databases; SQLite picks its own pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import text

from producer_registry.core.errors import DatabaseError
from producer_registry.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 10, max_overflow: int = 5,
    ):
        engine_options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_options.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_options)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create missing tables (CREATE TABLE IF NOT EXISTS). No migrations."""
        import producer_registry.models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(
                f"Table creation failed: {e}", extra={"operation": "create_tables"},
            )
            raise DatabaseError("schema bootstrap failed", "create_tables") from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness checks)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Release every pooled connection."""
        await self.engine.dispose()


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    return DatabaseSessionManager(database_url, **kwargs)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
