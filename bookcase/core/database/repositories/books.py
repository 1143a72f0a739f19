"""
Book repository.

Books are listed by title. A book must reference an existing author.
Deleting a book removes the series members and anthology stories that
point at it.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities import Author, Book, Member, Story
from .base import AsyncBaseRepository, QueryBuilder


class BookRepository(AsyncBaseRepository[Book]):
    """Repository for book data access operations using SQLModel."""

    label = "Book"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Book)

    def _ordering(self):
        return (Book.title, Book.id)

    def _apply_filters(self, stmt, filters: Mapping[str, Any]):
        stmt = QueryBuilder.apply_contains(stmt, Book.title, filters.get("title"))
        return QueryBuilder.apply_filters(stmt, Book, {k: v for k, v in filters.items() if k != "title"})

    async def _validate(self, data: Mapping[str, Any], entity_id: Optional[int] = None) -> None:
        await self._require_parent(data, "author_id", Author)
        await self._require_text(data, "title")

    async def _delete_dependents(self, entity_id: int) -> None:
        await self._delete_where(Member, Member.book_id == entity_id)
        await self._delete_where(Story, Story.book_id == entity_id)
