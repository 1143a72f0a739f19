"""
API endpoints for managing authors.

Provides CRUD operations for authors. Authors are listed by last name, then
first name, and can be searched by (partial) name. Deleting an author
cascades to the books, series and anthologies the author owns.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.database.entities import Author
from bookcase.core.database.repositories import AuthorRepository
from bookcase.core.database.session import get_session
from bookcase.core.exceptions import NotFound
from bookcase.core.logging_config import get_logger
from bookcase.core.models.io import AuthorCreate, AuthorRead, AuthorUpdate

from .common import Page, update_values

logger = get_logger(__name__)

router = APIRouter(tags=["authors"])


@router.get(
    "",
    response_model=List[AuthorRead],
    summary="List Authors",
    description="List authors ordered by last name, then first name. Optionally filter by partial name.",
    response_description="A list of author objects.",
)
async def list_authors(
    name: Optional[str] = Query(default=None, description="Case-insensitive match on first or last name"),
    page: Page = Depends(),
    session: AsyncSession = Depends(get_session),
) -> List[AuthorRead]:
    """
    List authors.

    - **name**: Optional text matched (case-insensitive, partial) against first and last name.
    - **limit** / **offset**: Optional pagination.
    """
    authors = await AuthorRepository(session).list(limit=page.limit, offset=page.offset, filters={"name": name})
    logger.debug(f"Retrieved {len(authors)} authors (name={name})")
    return [AuthorRead.model_validate(author) for author in authors]


@router.get(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Get Author",
    responses={
        200: {"description": "Author found"},
        404: {"description": "Author not found"},
    },
)
async def get_author(
    author_id: int,
    session: AsyncSession = Depends(get_session),
) -> AuthorRead:
    """Get an author by ID."""
    author = await AuthorRepository(session).get_by_id(author_id)
    if author is None:
        raise NotFound(f"Author {author_id} not found")
    return AuthorRead.model_validate(author)


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Author",
    responses={
        201: {"description": "Author created successfully"},
        400: {"description": "Invalid author data"},
        409: {"description": "An author with this first and last name already exists"},
    },
)
async def create_author(
    payload: AuthorCreate,
    session: AsyncSession = Depends(get_session),
) -> AuthorRead:
    """
    Create a new author.

    - **first_name**: Required.
    - **last_name**: Required. First and last name together must be unique.
    - **notes**: Optional free text.
    """
    author = await AuthorRepository(session).create(Author(**payload.model_dump()))
    logger.info(f"Created author {author.id} ({author.last_name}|{author.first_name})")
    return AuthorRead.model_validate(author)


@router.put(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Update Author",
    description="Replace an author. Include `version` to have a stale update rejected.",
    responses={
        200: {"description": "Author updated successfully"},
        400: {"description": "Invalid author data"},
        404: {"description": "Author not found"},
        409: {"description": "Duplicate name or stale version"},
    },
)
async def update_author(
    author_id: int,
    payload: AuthorUpdate,
    session: AsyncSession = Depends(get_session),
) -> AuthorRead:
    """Update an author; the stored version is incremented."""
    values, version = update_values(author_id, payload)
    author = await AuthorRepository(session).update(author_id, values, version=version)
    logger.info(f"Updated author {author.id} to version {author.version}")
    return AuthorRead.model_validate(author)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Author",
    description="Delete an author together with their books, series and anthologies.",
    responses={
        204: {"description": "Author deleted successfully"},
        404: {"description": "Author not found"},
    },
)
async def delete_author(
    author_id: int,
    session: AsyncSession = Depends(get_session),
) -> None:
    """Delete an author and everything the author owns."""
    if not await AuthorRepository(session).delete(author_id):
        raise NotFound(f"Author {author_id} not found")
    logger.info(f"Deleted author {author_id}")
