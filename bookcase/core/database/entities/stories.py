"""
Anthology story entity model.

A story places a book at an ordinal position within an anthology.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, IdType, TimestampType, utc_now


class StoryBase(Base):
    """Base fields for an anthology story."""

    anthology_id: int = Field(foreign_key="anthologies.id", ondelete="CASCADE", index=True, sa_type=IdType)
    book_id: int = Field(foreign_key="books.id", ondelete="CASCADE", index=True, sa_type=IdType)
    ordinal: int = Field(description="Position of the story within the anthology")


class Story(StoryBase, table=True):
    """Persistent anthology story in database.

    Table: stories
    """

    __tablename__ = "stories"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    version: int = Field(default=0)
    published: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated: datetime = Field(default_factory=utc_now, sa_type=TimestampType)

    def __repr__(self) -> str:
        return f"Story(id={self.id}, anthology_id={self.anthology_id}, book_id={self.book_id}, ordinal={self.ordinal})"
