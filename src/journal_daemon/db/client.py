"""
journal_daemon.db.client

Shared relational database client.

Responsibilities:
- Own the async engine and session factory for one database.
- Expose the session factory as the query handle used by DAOs.
- Provide the process-wide client instance built from settings.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from journal_daemon.db.session import create_engine, create_sessionmaker
from journal_daemon.settings import Settings, get_settings


class PostgresClient:
    def __init__(self, settings: Settings) -> None:
        self._engine = create_engine(settings)
        self._sessionmaker = create_sessionmaker(self._engine)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def get_client(self) -> async_sessionmaker[AsyncSession]:
        return self._sessionmaker

    async def dispose(self) -> None:
        await self._engine.dispose()


@lru_cache(maxsize=1)
def get_postgres_client() -> PostgresClient:
    return PostgresClient(get_settings())


# --- Module Notes -----------------------------------------------------------
# The engine binds pooled connections to the event loop that first uses them.
# Long-lived processes should call `get_postgres_client` from a single loop.
