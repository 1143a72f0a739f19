"""
Shared I/O model pieces.

Every catalog entity is read with the same bookkeeping fields and may be
updated with an optional ``version`` for the optimistic check.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bookcase.core.database.base import MAX_ID

# Ordinals are stored in 32-bit INTEGER columns
MAX_ORDINAL = 2**31 - 1


class EntityRead(BaseModel):
    """Bookkeeping fields present on every entity read from the API."""

    id: int
    version: int = Field(description="Incremented on every successful update")
    published: datetime = Field(description="When the entity was created (UTC)")
    updated: datetime = Field(description="When the entity was last changed (UTC)")

    model_config = ConfigDict(from_attributes=True)


class VersionedUpdate(BaseModel):
    """Fields accepted on update in addition to the entity fields.

    ``id`` is optional and must match the path when given. ``version`` is
    optional and, when given, must match the stored version.
    """

    id: Optional[int] = Field(default=None, description="Must match the path identifier when present")
    version: Optional[int] = Field(default=None, description="Version the caller last read")
