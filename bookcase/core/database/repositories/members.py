"""
Series member repository.

Members are listed by series, then ordinal, so filtering by series yields
the reading order of that series. A member must reference an existing
series and an existing book.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.exceptions import BadRequest

from ..entities import Book, Member, Series
from .base import AsyncBaseRepository


class MemberRepository(AsyncBaseRepository[Member]):
    """Repository for series member data access operations using SQLModel."""

    label = "Member"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Member)

    def _ordering(self):
        return (Member.series_id, Member.ordinal, Member.id)

    async def _validate(self, data: Mapping[str, Any], entity_id: Optional[int] = None) -> None:
        await self._require_parent(data, "series_id", Series)
        await self._require_parent(data, "book_id", Book)
        if data.get("ordinal") is None:
            raise BadRequest("Member ordinal is required")
