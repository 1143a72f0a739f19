"""
API endpoints for managing books.

Books are listed by title. Deleting a book removes the series members and
anthology stories that reference it.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.database.entities import Book
from bookcase.core.database.repositories import BookRepository
from bookcase.core.database.session import get_session
from bookcase.core.exceptions import NotFound
from bookcase.core.logging_config import get_logger
from bookcase.core.models.io import BookCreate, BookRead, BookUpdate

from .common import MAX_ID, Page, update_values

logger = get_logger(__name__)

router = APIRouter(tags=["books"])


@router.get(
    "",
    response_model=List[BookRead],
    summary="List Books",
    description="List books ordered by title, optionally filtered by partial title or author.",
)
async def list_books(
    title: Optional[str] = Query(default=None, description="Case-insensitive partial title match"),
    author_id: Optional[int] = Query(default=None, le=MAX_ID, description="Only books by this author"),
    page: Page = Depends(),
    session: AsyncSession = Depends(get_session),
) -> List[BookRead]:
    books = await BookRepository(session).list(
        limit=page.limit,
        offset=page.offset,
        filters={"title": title, "author_id": author_id},
    )
    logger.debug(f"Retrieved {len(books)} books (title={title}, author_id={author_id})")
    return [BookRead.model_validate(book) for book in books]


@router.get(
    "/{book_id}",
    response_model=BookRead,
    summary="Get Book",
    responses={404: {"description": "Book not found"}},
)
async def get_book(
    book_id: int,
    session: AsyncSession = Depends(get_session),
) -> BookRead:
    book = await BookRepository(session).get_by_id(book_id)
    if book is None:
        raise NotFound(f"Book {book_id} not found")
    return BookRead.model_validate(book)


@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Book",
    responses={400: {"description": "Invalid book data or unknown author"}},
)
async def create_book(
    payload: BookCreate,
    session: AsyncSession = Depends(get_session),
) -> BookRead:
    """
    Create a new book.

    - **author_id**: Required, must identify an existing author.
    - **title**: Required.
    - **location**: Where the copy lives (defaults to OTHER).
    - **read**: Whether the book has been read (defaults to false).
    """
    book = await BookRepository(session).create(Book(**payload.model_dump()))
    logger.info(f"Created book {book.id} ({book.title})")
    return BookRead.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookRead,
    summary="Update Book",
    responses={
        400: {"description": "Invalid book data or unknown author"},
        404: {"description": "Book not found"},
        409: {"description": "Stale version"},
    },
)
async def update_book(
    book_id: int,
    payload: BookUpdate,
    session: AsyncSession = Depends(get_session),
) -> BookRead:
    values, version = update_values(book_id, payload)
    book = await BookRepository(session).update(book_id, values, version=version)
    logger.info(f"Updated book {book.id} to version {book.version}")
    return BookRead.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Book",
    responses={404: {"description": "Book not found"}},
)
async def delete_book(
    book_id: int,
    session: AsyncSession = Depends(get_session),
) -> None:
    if not await BookRepository(session).delete(book_id):
        raise NotFound(f"Book {book_id} not found")
    logger.info(f"Deleted book {book_id}")
