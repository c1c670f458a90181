"""Database Session Manager — async connection pool, schema bootstrap, and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - SQLAlchemy exceptions mapped to DatabaseError (core/errors.py) by
      maps_database_errors on every store operation and by session()
    - bootstrap_database() either ensures every table exists or exits the process

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - TLS to PostgreSQL without certificate verification: hosted Postgres
      (Neon) requires TLS but presents certificates the container cannot verify
    - SQLite URLs skip pool sizing: aiosqlite uses its own pool classes
"""

import functools
import logging
import ssl
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.errors import DatabaseError, StartupError
from app.db.base import Base
import app.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _insecure_tls_context() -> ssl.SSLContext:
    """TLS required, certificate verification disabled."""
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def to_database_error(e: SQLAlchemyError) -> DatabaseError:
    """Log a SQLAlchemy failure and return the matching DatabaseError."""
    if isinstance(e, IntegrityError):
        logger.error(f"DB integrity error: {e}")
        return DatabaseError("Integrity constraint violated", "commit")
    if isinstance(e, OperationalError):
        logger.error(f"DB operational error: {e}")
        return DatabaseError("Connection or operational error", "execute")
    if isinstance(e, DBAPIError):
        logger.error(f"DB driver error: {e}")
        return DatabaseError("Database driver error", "query")
    logger.error(f"SQLAlchemy error: {e}")
    return DatabaseError("Database operation failed", "unknown")


def maps_database_errors(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Roll back the session passed first and raise DatabaseError on SQLAlchemy failure."""

    @functools.wraps(func)
    async def wrapper(db: AsyncSession, *args, **kwargs):
        try:
            return await func(db, *args, **kwargs)
        except SQLAlchemyError as e:
            await db.rollback()
            raise to_database_error(e) from e

    return wrapper


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        use_ssl: bool = False,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        if use_ssl and database_url.startswith("postgresql"):
            engine_kwargs["connect_args"] = {"ssl": _insecure_tls_context()}
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
            raise to_database_error(e) from e
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Idempotent CREATE TABLE IF NOT EXISTS for every model."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        for table in Base.metadata.sorted_tables:
            logger.info(f'Table "{table.name}" ensured to exist')

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
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


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def bootstrap_database() -> None:
    """Connect and ensure the schema exists; any failure terminates the process."""
    try:
        if not db_manager:
            raise StartupError("Database not initialized")
        async with db_manager.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Connected to database")
        await db_manager.create_tables()
    except Exception as e:
        logger.critical(
            f"Database connection or table creation error: {e}", exc_info=True,
        )
        sys.exit(1)


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
