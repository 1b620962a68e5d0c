"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py) via _ERROR_TABLE,
      tagged with the DbOperation that failed

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only applied to pooled drivers; SQLite uses SQLAlchemy's default pool
"""

import logging
from contextlib import asynccontextmanager
from enum import Enum
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    DataError, IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from app.core.errors import DatabaseError
from app.db.base import Base

logger = logging.getLogger(__name__)


class DbOperation(str, Enum):
    """Which stage of a tweet/user round trip failed."""
    CONSTRAINT = "constraint"
    VALUE = "value"
    CONNECTION = "connection"
    STATEMENT = "statement"
    ORM = "orm"


# Most specific first: DataError and IntegrityError subclass DBAPIError
_ERROR_TABLE: tuple[tuple[type[SQLAlchemyError], str, DbOperation], ...] = (
    (IntegrityError, "Integrity constraint violated", DbOperation.CONSTRAINT),
    (DataError, "Value rejected by column type", DbOperation.VALUE),
    (OperationalError, "Connection or operational error", DbOperation.CONNECTION),
    (DBAPIError, "Database driver error", DbOperation.STATEMENT),
)


def classify_db_error(exc: SQLAlchemyError) -> tuple[str, DbOperation]:
    for error_type, message, operation in _ERROR_TABLE:
        if isinstance(exc, error_type):
            return message, operation
    return "Database operation failed", DbOperation.ORM


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
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
        except SQLAlchemyError as e:
            await session.rollback()
            message, operation = classify_db_error(e)
            logger.error(
                f"DB {operation.value} error: {e}",
                extra={"error_code": type(e).__name__},
            )
            raise DatabaseError(message, operation.value) from e
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create any missing tables from Base.metadata."""
        import app.models  # noqa: F401  (populates Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
