"""
Anthology story repository.

Stories are listed by anthology, then ordinal. A story must reference an
existing anthology and an existing book.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.exceptions import BadRequest

from ..entities import Anthology, Book, Story
from .base import AsyncBaseRepository


class StoryRepository(AsyncBaseRepository[Story]):
    """Repository for anthology story data access operations using SQLModel."""

    label = "Story"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Story)

    def _ordering(self):
        return (Story.anthology_id, Story.ordinal, Story.id)

    async def _validate(self, data: Mapping[str, Any], entity_id: Optional[int] = None) -> None:
        await self._require_parent(data, "anthology_id", Anthology)
        await self._require_parent(data, "book_id", Book)
        if data.get("ordinal") is None:
            raise BadRequest("Story ordinal is required")
