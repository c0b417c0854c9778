"""Database Access — engine lifecycle and one AsyncSession per request.

Invariants:
    - A request session is rolled back when its handler raises, then closed
    - SQLite connections enforce foreign keys (PRAGMA foreign_keys=ON)
    - Nothing connects at import: the engine is created by init_db() in the lifespan

Design Decisions:
    - expire_on_commit=False: rows returned by handlers stay readable after commit
    - SQLAlchemy errors are re-raised untouched: handlers translate IntegrityError,
      the error handlers turn everything else into a 500
    - Server databases get pool_pre_ping and hourly recycling; SQLite keeps the
      dialect's own pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

logger = logging.getLogger(__name__)

POOL_RECYCLE_SECONDS = 3600


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _foreign_keys_on(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(
    database_url: str, pool_size: int = 20, max_overflow: int = 10,
) -> AsyncEngine:
    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url)
        enable_sqlite_foreign_keys(engine)
        return engine
    return create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        pool_recycle=POOL_RECYCLE_SECONDS,
    )


class DatabaseSessionManager:
    """Owns the engine and hands out request-scoped sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = build_engine(database_url, pool_size, max_overflow)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            try:
                yield session
            except Exception as exc:
                await session.rollback()
                if isinstance(exc, SQLAlchemyError):
                    logger.error(f"Database error, transaction rolled back: {exc}")
                raise

    async def health_check(self) -> bool:
        """True when the database answers a trivial query."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            logger.error(f"Database health check failed: {exc}")
            return False
        return True

    async def close(self) -> None:
        await self.engine.dispose()


# Set by init_db() on startup, cleared by close_db() on shutdown
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **engine_options) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **engine_options)
    logger.info("Database engine created")
    return db_manager


async def close_db() -> None:
    """Dispose the pool; safe to call when never initialized."""
    global db_manager
    if db_manager is None:
        return
    await db_manager.close()
    db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if db_manager is None:
        raise RuntimeError("Database engine is not initialized; is the lifespan running?")
    async with db_manager.session() as session:
        yield session
