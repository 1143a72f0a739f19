"""
API endpoints for managing anthology stories.

Stories are listed by anthology, then ordinal; filter by ``anthology_id``
to get a table of contents, or by ``book_id`` to find where a book appears.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.database.entities import Story
from bookcase.core.database.repositories import StoryRepository
from bookcase.core.database.session import get_session
from bookcase.core.exceptions import NotFound
from bookcase.core.logging_config import get_logger
from bookcase.core.models.io import StoryCreate, StoryRead, StoryUpdate

from .common import MAX_ID, Page, update_values

logger = get_logger(__name__)

router = APIRouter(tags=["stories"])


@router.get(
    "",
    response_model=List[StoryRead],
    summary="List Anthology Stories",
)
async def list_stories(
    anthology_id: Optional[int] = Query(default=None, le=MAX_ID, description="Only stories of this anthology"),
    book_id: Optional[int] = Query(default=None, le=MAX_ID, description="Only stories for this book"),
    page: Page = Depends(),
    session: AsyncSession = Depends(get_session),
) -> List[StoryRead]:
    stories = await StoryRepository(session).list(
        limit=page.limit,
        offset=page.offset,
        filters={"anthology_id": anthology_id, "book_id": book_id},
    )
    logger.debug(f"Retrieved {len(stories)} stories (anthology_id={anthology_id}, book_id={book_id})")
    return [StoryRead.model_validate(story) for story in stories]


@router.get(
    "/{story_id}",
    response_model=StoryRead,
    summary="Get Anthology Story",
    responses={404: {"description": "Story not found"}},
)
async def get_story(
    story_id: int,
    session: AsyncSession = Depends(get_session),
) -> StoryRead:
    story = await StoryRepository(session).get_by_id(story_id)
    if story is None:
        raise NotFound(f"Story {story_id} not found")
    return StoryRead.model_validate(story)


@router.post(
    "",
    response_model=StoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Anthology Story",
    responses={400: {"description": "Invalid story data, unknown anthology or unknown book"}},
)
async def create_story(
    payload: StoryCreate,
    session: AsyncSession = Depends(get_session),
) -> StoryRead:
    story = await StoryRepository(session).create(Story(**payload.model_dump()))
    logger.info(f"Created story {story.id} (anthology={story.anthology_id}, book={story.book_id})")
    return StoryRead.model_validate(story)


@router.put(
    "/{story_id}",
    response_model=StoryRead,
    summary="Update Anthology Story",
    responses={
        400: {"description": "Invalid story data, unknown anthology or unknown book"},
        404: {"description": "Story not found"},
        409: {"description": "Stale version"},
    },
)
async def update_story(
    story_id: int,
    payload: StoryUpdate,
    session: AsyncSession = Depends(get_session),
) -> StoryRead:
    values, version = update_values(story_id, payload)
    story = await StoryRepository(session).update(story_id, values, version=version)
    logger.info(f"Updated story {story.id} to version {story.version}")
    return StoryRead.model_validate(story)


@router.delete(
    "/{story_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Anthology Story",
    responses={404: {"description": "Story not found"}},
)
async def delete_story(
    story_id: int,
    session: AsyncSession = Depends(get_session),
) -> None:
    if not await StoryRepository(session).delete(story_id):
        raise NotFound(f"Story {story_id} not found")
    logger.info(f"Deleted story {story_id}")
