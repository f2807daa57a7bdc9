"""
journal_daemon.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for DB sessions and DAOs.
- Encapsulate app.state access patterns (client/DAOs).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from journal_daemon.db.client import PostgresClient
from journal_daemon.db.daos.groups import GroupDao


def client_from_app(request: Request) -> PostgresClient:
    # Built on app startup in `journal_daemon.api.app.create_app`.
    return request.app.state.pg_client  # type: ignore[attr-defined]


def group_dao(request: Request) -> GroupDao:
    return request.app.state.group_dao  # type: ignore[attr-defined]


async def db_session(
    client: PostgresClient = Depends(client_from_app),
) -> AsyncIterator[AsyncSession]:
    session_factory = client.get_client()
    async with session_factory() as session:
        yield session
