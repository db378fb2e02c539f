"""Async engine and session factory.

One ``Database`` per process (see ``src.core.container.get_database``).
Repositories receive sessions from ``get_session`` and own the commit
that ends each unit of work; the context manager commits whatever is
still pending and rolls back on error.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import URL, Connection, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool


def _engine_options(url: URL, echo: bool, pool_size: int, max_overflow: int) -> dict[str, Any]:
    if url.get_backend_name() != "sqlite":
        return {
            "echo": echo,
            "pool_pre_ping": True,
            "pool_size": pool_size,
            "max_overflow": max_overflow,
            "connect_args": {"command_timeout": 60, "timeout": 30},
        }

    options: dict[str, Any] = {
        "echo": echo,
        "connect_args": {"check_same_thread": False},
    }
    # :memory: lives and dies with its connection
    if url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


class Database:
    """Owns the engine and hands out sessions.

    PostgreSQL (asyncpg) gets a pre-pinged pool. SQLite (aiosqlite) gets
    foreign keys switched on and opens every transaction with
    ``BEGIN IMMEDIATE``, so the first statement of a unit of work (including
    a ``with_for_update`` read, which SQLite compiles without a lock) takes
    the database write lock. In-memory URLs share a single connection.

    Example:
        db = Database(settings.database_url)
        async with db.get_session() as session:
            await session.execute(...)
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        url = make_url(database_url)
        self.engine: AsyncEngine = create_async_engine(
            url, **_engine_options(url, echo, pool_size, max_overflow)
        )
        if url.get_backend_name() == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _configure_sqlite_connection)
            event.listen(self.engine.sync_engine, "begin", _begin_immediate)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; commit on clean exit, roll back on error."""
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every mapped table.

        Used for SQLite runs and tests. PostgreSQL deployments go through
        ``alembic upgrade head``.
        """
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Run ``SELECT 1``; False when the database cannot be reached."""
        try:
            async with self.async_session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True


def _configure_sqlite_connection(dbapi_connection: Any, _connection_record: Any) -> None:
    # driver must not emit its own BEGIN; _begin_immediate does
    dbapi_connection.isolation_level = None
    # ON DELETE SET NULL is ignored without this pragma
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_immediate(conn: Connection) -> None:
    conn.exec_driver_sql("BEGIN IMMEDIATE")
