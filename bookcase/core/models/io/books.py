"""
Book I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from bookcase.core.models.enums import Location

from .common import MAX_ID, EntityRead, VersionedUpdate


class BookCreate(BaseModel):
    """Schema for creating a book via API."""

    author_id: int = Field(le=MAX_ID, description="Identifier of the owning author")
    title: str = Field(min_length=1, description="Book title")
    location: Location = Field(default=Location.OTHER, description="Where the copy lives")
    notes: Optional[str] = Field(default=None, description="Free text notes")
    read: bool = Field(default=False, description="Whether the book has been read")


class BookUpdate(BookCreate, VersionedUpdate):
    """Schema for replacing a book via API."""


class BookRead(EntityRead):
    """Schema for reading a book from API."""

    author_id: int
    title: str
    location: Location
    notes: Optional[str] = None
    read: bool
