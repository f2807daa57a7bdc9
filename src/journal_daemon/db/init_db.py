"""
journal_daemon.db.init_db

DB initialization helper (dev/test convenience).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from journal_daemon.db import models  # noqa: F401  # register tables on Base.metadata
from journal_daemon.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist. Production databases are migrated by the
    application that owns the schema.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
