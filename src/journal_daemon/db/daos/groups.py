"""
journal_daemon.db.daos.groups

Data-access object for `Group` records.

Responsibilities:
- Look up a single group by id.
- Bind the shared database client and logger lazily when they were not injected.
- Offer a module-level `find` for callers without a composition root.
"""

from __future__ import annotations

import structlog
from sqlalchemy import select

from journal_daemon.db.client import PostgresClient, get_postgres_client
from journal_daemon.db.models import MAX_GROUP_ID, Group
from journal_daemon.observability.logging import get_logger


class GroupDao:
    def __init__(
        self,
        *,
        client: PostgresClient | None = None,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._pgc = client
        self._log = log

    @property
    def client(self) -> PostgresClient | None:
        return self._pgc

    @property
    def log(self) -> structlog.stdlib.BoundLogger | None:
        return self._log

    @property
    def initialized(self) -> bool:
        return self._pgc is not None and self._log is not None

    def set_logger(self) -> None:
        self._log = get_logger(__name__)

    def set_client(self) -> None:
        self._pgc = get_postgres_client()

    def initialize(self) -> None:
        # Only unbound collaborators are fetched; injected ones are kept.
        if self._log is None:
            self.set_logger()
        if self._pgc is None:
            self.set_client()

    async def find_group(self, group_id: int) -> Group | None:
        """
        Return the group with `group_id`, or None when no row matches.

        Requires a bound client and logger (injected or via `initialize()`).
        Ids outside the storable BIGINT range are answered with None without a
        query. Database errors propagate as raised by SQLAlchemy.
        """

        if not 0 <= group_id <= MAX_GROUP_ID:
            self._log.debug("group_lookup", group_id=group_id, found=False)
            return None

        stmt = select(Group).where(Group.id == group_id).limit(1)
        session_factory = self._pgc.get_client()
        async with session_factory() as session:
            group = (await session.execute(stmt)).scalars().first()
        self._log.debug("group_lookup", group_id=group_id, found=group is not None)
        return group


_group_dao: GroupDao | None = None


def get_group_dao() -> GroupDao:
    """
    Return the process-wide accessor, creating and initializing it on first use.

    Creation is guarded by a plain None check. That is safe on one event loop, but
    threads racing on the first call may each build an accessor. Services with a
    startup hook should construct a `GroupDao` there and inject it instead.
    """

    global _group_dao
    if _group_dao is None:
        _group_dao = GroupDao()
    if not _group_dao.initialized:
        _group_dao.initialize()
    return _group_dao


async def find(group_id: int) -> Group | None:
    return await get_group_dao().find_group(group_id)
