"""
Series I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .common import MAX_ID, EntityRead, VersionedUpdate


class SeriesCreate(BaseModel):
    """Schema for creating a series via API."""

    author_id: int = Field(le=MAX_ID, description="Identifier of the owning author")
    title: str = Field(min_length=1, description="Series title")
    notes: Optional[str] = Field(default=None, description="Free text notes")


class SeriesUpdate(SeriesCreate, VersionedUpdate):
    """Schema for replacing a series via API."""


class SeriesRead(EntityRead):
    """Schema for reading a series from API."""

    author_id: int
    title: str
    notes: Optional[str] = None
