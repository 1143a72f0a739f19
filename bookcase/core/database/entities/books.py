"""
Book entity model.

A book belongs to exactly one author and may be referenced by series
members and anthology stories.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from bookcase.core.models.enums import Location

from ..base import Base, IdType, TimestampType, utc_now


class BookBase(Base):
    """Base fields for a book."""

    author_id: int = Field(foreign_key="authors.id", ondelete="CASCADE", index=True, sa_type=IdType)
    title: str = Field(index=True, description="Book title")
    location: Location = Field(default=Location.OTHER, description="Where the copy lives")
    notes: Optional[str] = Field(default=None, description="Free text notes")
    read: bool = Field(default=False, description="Whether the book has been read")


class Book(BookBase, table=True):
    """Persistent book in database.

    Table: books
    """

    __tablename__ = "books"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    version: int = Field(default=0)
    published: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated: datetime = Field(default_factory=utc_now, sa_type=TimestampType)

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title={self.title}, author_id={self.author_id})"
