"""Anthology repository: listed by title, owned by an author, cascades to stories."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities import Anthology, Author, Story
from .base import AsyncBaseRepository, QueryBuilder


class AnthologyRepository(AsyncBaseRepository[Anthology]):
    """Repository for anthology data access operations using SQLModel."""

    label = "Anthology"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Anthology)

    def _ordering(self):
        return (Anthology.title, Anthology.id)

    def _apply_filters(self, stmt, filters: Mapping[str, Any]):
        stmt = QueryBuilder.apply_contains(stmt, Anthology.title, filters.get("title"))
        return QueryBuilder.apply_filters(stmt, Anthology, {k: v for k, v in filters.items() if k != "title"})

    async def _validate(self, data: Mapping[str, Any], entity_id: Optional[int] = None) -> None:
        await self._require_parent(data, "author_id", Author)
        await self._require_text(data, "title")

    async def _delete_dependents(self, entity_id: int) -> None:
        await self._delete_where(Story, Story.anthology_id == entity_id)
