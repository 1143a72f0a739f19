"""
Author repository.

Authors are listed by last name, then first name. First and last name
together must be unique. Deleting an author removes everything the author
owns: books, series and anthologies, along with the members and stories
that reference them.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bookcase.core.exceptions import NotUnique

from ..entities import Anthology, Author, Book, Member, Series, Story
from .base import AsyncBaseRepository, QueryBuilder


class AuthorRepository(AsyncBaseRepository[Author]):
    """Repository for author data access operations using SQLModel."""

    label = "Author"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Author)

    def _ordering(self):
        return (Author.last_name, Author.first_name, Author.id)

    def _apply_filters(self, stmt, filters: Mapping[str, Any]):
        name = filters.get("name")
        if name:
            pattern = f"%{name}%"
            stmt = stmt.where(or_(Author.first_name.ilike(pattern), Author.last_name.ilike(pattern)))
        return QueryBuilder.apply_filters(stmt, Author, {k: v for k, v in filters.items() if k != "name"})

    async def _validate(self, data: Mapping[str, Any], entity_id: Optional[int] = None) -> None:
        await self._require_text(data, "first_name")
        await self._require_text(data, "last_name")

        stmt = select(Author).where(
            (Author.first_name == data["first_name"]) & (Author.last_name == data["last_name"])
        )
        if entity_id is not None:
            stmt = stmt.where(Author.id != entity_id)
        result = await self.session.execute(stmt)
        if result.scalars().first() is not None:
            raise NotUnique(f"Author '{data['first_name']} {data['last_name']}' already exists")

    async def _delete_dependents(self, entity_id: int) -> None:
        book_ids = select(Book.id).where(Book.author_id == entity_id)
        series_ids = select(Series.id).where(Series.author_id == entity_id)
        anthology_ids = select(Anthology.id).where(Anthology.author_id == entity_id)

        await self._delete_where(Member, or_(Member.book_id.in_(book_ids), Member.series_id.in_(series_ids)))
        await self._delete_where(Story, or_(Story.book_id.in_(book_ids), Story.anthology_id.in_(anthology_ids)))
        await self._delete_where(Series, Series.author_id == entity_id)
        await self._delete_where(Anthology, Anthology.author_id == entity_id)
        await self._delete_where(Book, Book.author_id == entity_id)

