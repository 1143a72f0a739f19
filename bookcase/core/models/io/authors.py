"""
Author I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .common import EntityRead, VersionedUpdate


class AuthorCreate(BaseModel):
    """Schema for creating an author via API."""

    first_name: str = Field(min_length=1, description="Author first name")
    last_name: str = Field(min_length=1, description="Author last name")
    notes: Optional[str] = Field(default=None, description="Free text notes")


class AuthorUpdate(AuthorCreate, VersionedUpdate):
    """Schema for replacing an author via API."""


class AuthorRead(EntityRead):
    """Schema for reading an author from API."""

    first_name: str
    last_name: str
    notes: Optional[str] = None
