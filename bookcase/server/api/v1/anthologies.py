"""
API endpoints for managing anthologies.

Anthologies are listed by title. Deleting an anthology removes its stories.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.database.entities import Anthology
from bookcase.core.database.repositories import AnthologyRepository
from bookcase.core.database.session import get_session
from bookcase.core.exceptions import NotFound
from bookcase.core.logging_config import get_logger
from bookcase.core.models.io import AnthologyCreate, AnthologyRead, AnthologyUpdate

from .common import MAX_ID, Page, update_values

logger = get_logger(__name__)

router = APIRouter(tags=["anthologies"])


@router.get(
    "",
    response_model=List[AnthologyRead],
    summary="List Anthologies",
    description="List anthologies ordered by title, optionally filtered by partial title or author.",
)
async def list_anthologies(
    title: Optional[str] = Query(default=None, description="Case-insensitive partial title match"),
    author_id: Optional[int] = Query(default=None, le=MAX_ID, description="Only anthologies by this author"),
    page: Page = Depends(),
    session: AsyncSession = Depends(get_session),
) -> List[AnthologyRead]:
    anthologies = await AnthologyRepository(session).list(
        limit=page.limit,
        offset=page.offset,
        filters={"title": title, "author_id": author_id},
    )
    logger.debug(f"Retrieved {len(anthologies)} anthologies (title={title}, author_id={author_id})")
    return [AnthologyRead.model_validate(anthology) for anthology in anthologies]


@router.get(
    "/{anthology_id}",
    response_model=AnthologyRead,
    summary="Get Anthology",
    responses={404: {"description": "Anthology not found"}},
)
async def get_anthology(
    anthology_id: int,
    session: AsyncSession = Depends(get_session),
) -> AnthologyRead:
    anthology = await AnthologyRepository(session).get_by_id(anthology_id)
    if anthology is None:
        raise NotFound(f"Anthology {anthology_id} not found")
    return AnthologyRead.model_validate(anthology)


@router.post(
    "",
    response_model=AnthologyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Anthology",
    responses={400: {"description": "Invalid anthology data or unknown author"}},
)
async def create_anthology(
    payload: AnthologyCreate,
    session: AsyncSession = Depends(get_session),
) -> AnthologyRead:
    anthology = await AnthologyRepository(session).create(Anthology(**payload.model_dump()))
    logger.info(f"Created anthology {anthology.id} ({anthology.title})")
    return AnthologyRead.model_validate(anthology)


@router.put(
    "/{anthology_id}",
    response_model=AnthologyRead,
    summary="Update Anthology",
    responses={
        400: {"description": "Invalid anthology data or unknown author"},
        404: {"description": "Anthology not found"},
        409: {"description": "Stale version"},
    },
)
async def update_anthology(
    anthology_id: int,
    payload: AnthologyUpdate,
    session: AsyncSession = Depends(get_session),
) -> AnthologyRead:
    values, version = update_values(anthology_id, payload)
    anthology = await AnthologyRepository(session).update(anthology_id, values, version=version)
    logger.info(f"Updated anthology {anthology.id} to version {anthology.version}")
    return AnthologyRead.model_validate(anthology)


@router.delete(
    "/{anthology_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Anthology",
    responses={404: {"description": "Anthology not found"}},
)
async def delete_anthology(
    anthology_id: int,
    session: AsyncSession = Depends(get_session),
) -> None:
    if not await AnthologyRepository(session).delete(anthology_id):
        raise NotFound(f"Anthology {anthology_id} not found")
    logger.info(f"Deleted anthology {anthology_id}")
