"""
Async SQLAlchemy engine & session factory (aiosqlite by default, asyncpg for PostgreSQL).
"""

from __future__ import annotations

import asyncio
from weakref import WeakKeyDictionary

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storefront.core.config import settings


class SerializedAsyncSession(AsyncSession):
    """AsyncSession that holds an event-loop-wide lock from ``async with`` entry to exit.

    Used when every session shares the single StaticPool connection, so that
    one session's rollback can never undo another session's pending writes.
    """

    _locks: WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock] = WeakKeyDictionary()

    async def __aenter__(self) -> SerializedAsyncSession:
        loop = asyncio.get_running_loop()
        self._lock = self._locks.setdefault(loop, asyncio.Lock())
        await self._lock.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            self._lock.release()


engine_args: dict = {
    "echo": False,
    "pool_pre_ping": True,
}
session_class: type[AsyncSession] = AsyncSession

if "postgresql" in settings.DATABASE_URL:
    engine_args.update(
        {
            "pool_size": 20,
            "max_overflow": 10,
            "pool_recycle": 300,
        }
    )
elif settings.DATABASE_URL.startswith("sqlite") and ":memory:" in settings.DATABASE_URL:
    # One shared connection, otherwise every session gets its own empty database
    engine_args.update(
        {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    )
    session_class = SerializedAsyncSession

engine = create_async_engine(
    settings.DATABASE_URL,
    **engine_args,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=session_class,
    expire_on_commit=False,
)
