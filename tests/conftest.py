"""
tests.conftest

Shared fixtures: file-backed SQLite databases and process-wide singleton resets.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio

from journal_daemon.db import client as client_module
from journal_daemon.db.client import PostgresClient
from journal_daemon.db.daos import groups as groups_module
from journal_daemon.db.init_db import init_db
from journal_daemon.db.models import Group
from journal_daemon.settings import Settings, get_settings


def _sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=_sqlite_url(tmp_path / "journal.db"))


@pytest_asyncio.fixture
async def pg_client(settings: Settings) -> AsyncIterator[PostgresClient]:
    client = PostgresClient(settings)
    await init_db(client.engine)
    try:
        yield client
    finally:
        await client.dispose()


async def _seed(client: PostgresClient, *groups: Group) -> None:
    session_factory = client.get_client()
    async with session_factory() as session:
        session.add_all(groups)
        await session.commit()


@pytest.fixture
def shared_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """Point the process-wide providers at a fresh database and reset the shared DAO."""

    url = _sqlite_url(tmp_path / "shared.db")
    monkeypatch.setenv("JOURNAL_DATABASE_URL", url)
    monkeypatch.setenv("JOURNAL_ENV", "test")
    get_settings.cache_clear()
    client_module.get_postgres_client.cache_clear()
    monkeypatch.setattr(groups_module, "_group_dao", None)
    yield url
    get_settings.cache_clear()
    client_module.get_postgres_client.cache_clear()


@pytest.fixture
def seed():
    return _seed
