"""
journal_daemon.api.app

FastAPI app factory for the journal daemon.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create and dispose the shared database client.
- Construct DAOs once with their collaborators and expose them on app.state.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from journal_daemon import __version__
from journal_daemon.api.routers.groups import router as groups_router
from journal_daemon.api.routers.health import router as health_router
from journal_daemon.db.client import PostgresClient
from journal_daemon.db.daos.groups import GroupDao
from journal_daemon.db.init_db import init_db
from journal_daemon.observability.logging import configure_logging, get_logger
from journal_daemon.observability.middleware import RequestContextMiddleware
from journal_daemon.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        client = PostgresClient(settings)
        app.state.pg_client = client
        app.state.group_dao = GroupDao(client=client, log=get_logger("journal_daemon.daos"))
        try:
            if settings.env in ("dev", "test"):
                await init_db(client.engine)
            yield
        finally:
            await client.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Journal Daemon",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(groups_router)

    return app


# --- Module Notes -----------------------------------------------------------
# The module-level `journal_daemon.db.daos.groups.find` remains for scripts; the
# API always goes through the DAO built here.
