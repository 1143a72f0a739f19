"""
API endpoints for managing series members.

Members are listed by series, then ordinal; filter by ``series_id`` to get a
series in reading order, or by ``book_id`` to find the series a book is in.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.database.entities import Member
from bookcase.core.database.repositories import MemberRepository
from bookcase.core.database.session import get_session
from bookcase.core.exceptions import NotFound
from bookcase.core.logging_config import get_logger
from bookcase.core.models.io import MemberCreate, MemberRead, MemberUpdate

from .common import MAX_ID, Page, update_values

logger = get_logger(__name__)

router = APIRouter(tags=["members"])


@router.get(
    "",
    response_model=List[MemberRead],
    summary="List Series Members",
)
async def list_members(
    series_id: Optional[int] = Query(default=None, le=MAX_ID, description="Only members of this series"),
    book_id: Optional[int] = Query(default=None, le=MAX_ID, description="Only members for this book"),
    page: Page = Depends(),
    session: AsyncSession = Depends(get_session),
) -> List[MemberRead]:
    members = await MemberRepository(session).list(
        limit=page.limit,
        offset=page.offset,
        filters={"series_id": series_id, "book_id": book_id},
    )
    logger.debug(f"Retrieved {len(members)} members (series_id={series_id}, book_id={book_id})")
    return [MemberRead.model_validate(member) for member in members]


@router.get(
    "/{member_id}",
    response_model=MemberRead,
    summary="Get Series Member",
    responses={404: {"description": "Member not found"}},
)
async def get_member(
    member_id: int,
    session: AsyncSession = Depends(get_session),
) -> MemberRead:
    member = await MemberRepository(session).get_by_id(member_id)
    if member is None:
        raise NotFound(f"Member {member_id} not found")
    return MemberRead.model_validate(member)


@router.post(
    "",
    response_model=MemberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Series Member",
    responses={400: {"description": "Invalid member data, unknown series or unknown book"}},
)
async def create_member(
    payload: MemberCreate,
    session: AsyncSession = Depends(get_session),
) -> MemberRead:
    member = await MemberRepository(session).create(Member(**payload.model_dump()))
    logger.info(f"Created member {member.id} (series={member.series_id}, book={member.book_id})")
    return MemberRead.model_validate(member)


@router.put(
    "/{member_id}",
    response_model=MemberRead,
    summary="Update Series Member",
    responses={
        400: {"description": "Invalid member data, unknown series or unknown book"},
        404: {"description": "Member not found"},
        409: {"description": "Stale version"},
    },
)
async def update_member(
    member_id: int,
    payload: MemberUpdate,
    session: AsyncSession = Depends(get_session),
) -> MemberRead:
    values, version = update_values(member_id, payload)
    member = await MemberRepository(session).update(member_id, values, version=version)
    logger.info(f"Updated member {member.id} to version {member.version}")
    return MemberRead.model_validate(member)


@router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Series Member",
    responses={404: {"description": "Member not found"}},
)
async def delete_member(
    member_id: int,
    session: AsyncSession = Depends(get_session),
) -> None:
    if not await MemberRepository(session).delete(member_id):
        raise NotFound(f"Member {member_id} not found")
    logger.info(f"Deleted member {member_id}")
