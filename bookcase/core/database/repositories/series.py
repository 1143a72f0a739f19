"""Series repository: listed by title, owned by an author, cascades to members."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities import Author, Member, Series
from .base import AsyncBaseRepository, QueryBuilder


class SeriesRepository(AsyncBaseRepository[Series]):
    """Repository for series data access operations using SQLModel."""

    label = "Series"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Series)

    def _ordering(self):
        return (Series.title, Series.id)

    def _apply_filters(self, stmt, filters: Mapping[str, Any]):
        stmt = QueryBuilder.apply_contains(stmt, Series.title, filters.get("title"))
        return QueryBuilder.apply_filters(stmt, Series, {k: v for k, v in filters.items() if k != "title"})

    async def _validate(self, data: Mapping[str, Any], entity_id: Optional[int] = None) -> None:
        await self._require_parent(data, "author_id", Author)
        await self._require_text(data, "title")

    async def _delete_dependents(self, entity_id: int) -> None:
        await self._delete_where(Member, Member.series_id == entity_id)
