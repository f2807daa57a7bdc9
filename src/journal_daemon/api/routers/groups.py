"""
journal_daemon.api.routers.groups

Read endpoint for groups.

Responsibilities:
- Resolve a group by id through the injected `GroupDao`.
- Map a missing group to 404.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel, ConfigDict
from starlette.status import HTTP_404_NOT_FOUND

from journal_daemon.api.deps import group_dao
from journal_daemon.db.daos.groups import GroupDao
from journal_daemon.db.models import UINT64_MAX

router = APIRouter(prefix="/v1/groups", tags=["groups"])


class GroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    owner: str
    default_group: bool
    created_at: datetime
    updated_at: datetime


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(
    group_id: int = Path(ge=0, le=UINT64_MAX),
    dao: GroupDao = Depends(group_dao),
) -> GroupResponse:
    group = await dao.find_group(group_id)
    if group is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Group not found")
    return GroupResponse.model_validate(group)
