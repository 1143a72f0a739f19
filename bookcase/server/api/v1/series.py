"""
API endpoints for managing series.

Series are listed by title. Deleting a series removes its members.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.database.entities import Series
from bookcase.core.database.repositories import SeriesRepository
from bookcase.core.database.session import get_session
from bookcase.core.exceptions import NotFound
from bookcase.core.logging_config import get_logger
from bookcase.core.models.io import SeriesCreate, SeriesRead, SeriesUpdate

from .common import MAX_ID, Page, update_values

logger = get_logger(__name__)

router = APIRouter(tags=["series"])


@router.get(
    "",
    response_model=List[SeriesRead],
    summary="List Series",
    description="List series ordered by title, optionally filtered by partial title or author.",
)
async def list_series(
    title: Optional[str] = Query(default=None, description="Case-insensitive partial title match"),
    author_id: Optional[int] = Query(default=None, le=MAX_ID, description="Only series by this author"),
    page: Page = Depends(),
    session: AsyncSession = Depends(get_session),
) -> List[SeriesRead]:
    serieses = await SeriesRepository(session).list(
        limit=page.limit,
        offset=page.offset,
        filters={"title": title, "author_id": author_id},
    )
    logger.debug(f"Retrieved {len(serieses)} series (title={title}, author_id={author_id})")
    return [SeriesRead.model_validate(series) for series in serieses]


@router.get(
    "/{series_id}",
    response_model=SeriesRead,
    summary="Get Series",
    responses={404: {"description": "Series not found"}},
)
async def get_series(
    series_id: int,
    session: AsyncSession = Depends(get_session),
) -> SeriesRead:
    series = await SeriesRepository(session).get_by_id(series_id)
    if series is None:
        raise NotFound(f"Series {series_id} not found")
    return SeriesRead.model_validate(series)


@router.post(
    "",
    response_model=SeriesRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Series",
    responses={400: {"description": "Invalid series data or unknown author"}},
)
async def create_series(
    payload: SeriesCreate,
    session: AsyncSession = Depends(get_session),
) -> SeriesRead:
    series = await SeriesRepository(session).create(Series(**payload.model_dump()))
    logger.info(f"Created series {series.id} ({series.title})")
    return SeriesRead.model_validate(series)


@router.put(
    "/{series_id}",
    response_model=SeriesRead,
    summary="Update Series",
    responses={
        400: {"description": "Invalid series data or unknown author"},
        404: {"description": "Series not found"},
        409: {"description": "Stale version"},
    },
)
async def update_series(
    series_id: int,
    payload: SeriesUpdate,
    session: AsyncSession = Depends(get_session),
) -> SeriesRead:
    values, version = update_values(series_id, payload)
    series = await SeriesRepository(session).update(series_id, values, version=version)
    logger.info(f"Updated series {series.id} to version {series.version}")
    return SeriesRead.model_validate(series)


@router.delete(
    "/{series_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Series",
    responses={404: {"description": "Series not found"}},
)
async def delete_series(
    series_id: int,
    session: AsyncSession = Depends(get_session),
) -> None:
    if not await SeriesRepository(session).delete(series_id):
        raise NotFound(f"Series {series_id} not found")
    logger.info(f"Deleted series {series_id}")
