"""
Anthology I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from bookcase.core.models.enums import Location

from .common import MAX_ID, EntityRead, VersionedUpdate


class AnthologyCreate(BaseModel):
    """Schema for creating an anthology via API."""

    author_id: int = Field(le=MAX_ID, description="Identifier of the owning author")
    title: str = Field(min_length=1, description="Anthology title")
    location: Location = Field(default=Location.OTHER, description="Where the copy lives")
    notes: Optional[str] = Field(default=None, description="Free text notes")
    read: bool = Field(default=False, description="Whether the anthology has been read")


class AnthologyUpdate(AnthologyCreate, VersionedUpdate):
    """Schema for replacing an anthology via API."""


class AnthologyRead(EntityRead):
    """Schema for reading an anthology from API."""

    author_id: int
    title: str
    location: Location
    notes: Optional[str] = None
    read: bool
