"""
journal_daemon.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with DB connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from journal_daemon.api.deps import db_session

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: the process is up and serving HTTP.
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    # Readiness: the database must answer a trivial query.
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# /readyz checks connectivity only; it does not read the groups table.
