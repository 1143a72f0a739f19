"""Client-side entity models.

Every field is optional so that partial (even empty) entities can be built
and sent; the server decides what is missing. Unknown response fields are
ignored.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from bookcase.core.models.enums import Location


class Entity(BaseModel):
    """Bookkeeping fields shared by all catalog entities."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    version: Optional[int] = None
    published: Optional[datetime] = None
    updated: Optional[datetime] = None


class Author(Entity):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    notes: Optional[str] = None


class Book(Entity):
    author_id: Optional[int] = None
    title: Optional[str] = None
    location: Optional[Location] = None
    notes: Optional[str] = None
    read: Optional[bool] = None


class Series(Entity):
    author_id: Optional[int] = None
    title: Optional[str] = None
    notes: Optional[str] = None


class Anthology(Entity):
    author_id: Optional[int] = None
    title: Optional[str] = None
    location: Optional[Location] = None
    notes: Optional[str] = None
    read: Optional[bool] = None


class Member(Entity):
    """A book's place (``ordinal``) within a series."""

    series_id: Optional[int] = None
    book_id: Optional[int] = None
    ordinal: Optional[int] = None


class Story(Entity):
    """A book's place (``ordinal``) within an anthology."""

    anthology_id: Optional[int] = None
    book_id: Optional[int] = None
    ordinal: Optional[int] = None
