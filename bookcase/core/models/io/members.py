"""
Series member I/O models for API requests and responses.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .common import MAX_ID, MAX_ORDINAL, EntityRead, VersionedUpdate


class MemberCreate(BaseModel):
    """Schema for placing a book in a series via API."""

    series_id: int = Field(le=MAX_ID, description="Identifier of the series")
    book_id: int = Field(le=MAX_ID, description="Identifier of the book")
    ordinal: int = Field(le=MAX_ORDINAL, description="Position of the book within the series")


class MemberUpdate(MemberCreate, VersionedUpdate):
    """Schema for replacing a series member via API."""


class MemberRead(EntityRead):
    """Schema for reading a series member from API."""

    series_id: int
    book_id: int
    ordinal: int
