"""
journal_daemon.db.models

Persistence schema read by the daemon.

Responsibilities:
- Define the `Group` ORM model mapped onto the shared `groups` table.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from journal_daemon.db.base import Base


def _utcnow() -> datetime:
    return datetime.utcnow()


# Group ids are unsigned 64-bit values stored in a signed BIGINT column; ids
# above MAX_GROUP_ID cannot exist in the table.
MAX_GROUP_ID = 2**63 - 1
UINT64_MAX = 2**64 - 1

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
_GroupId = BigInteger().with_variant(Integer, "sqlite")


class Group(Base):
    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(_GroupId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    owner: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    default_group: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"Group(id={self.id!r}, name={self.name!r}, owner={self.owner!r})"


# --- Module Notes -----------------------------------------------------------
# The `groups` table is owned by the main application; the daemon only reads it.
# Column names must stay in sync with that schema.
