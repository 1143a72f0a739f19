"""
Anthology story I/O models for API requests and responses.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .common import MAX_ID, MAX_ORDINAL, EntityRead, VersionedUpdate


class StoryCreate(BaseModel):
    """Schema for placing a book in an anthology via API."""

    anthology_id: int = Field(le=MAX_ID, description="Identifier of the anthology")
    book_id: int = Field(le=MAX_ID, description="Identifier of the book")
    ordinal: int = Field(le=MAX_ORDINAL, description="Position of the story within the anthology")


class StoryUpdate(StoryCreate, VersionedUpdate):
    """Schema for replacing an anthology story via API."""


class StoryRead(EntityRead):
    """Schema for reading an anthology story from API."""

    anthology_id: int
    book_id: int
    ordinal: int
