"""
Series member entity model.

A member places a book at an ordinal position within a series.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, IdType, TimestampType, utc_now


class MemberBase(Base):
    """Base fields for a series member."""

    series_id: int = Field(foreign_key="series.id", ondelete="CASCADE", index=True, sa_type=IdType)
    book_id: int = Field(foreign_key="books.id", ondelete="CASCADE", index=True, sa_type=IdType)
    ordinal: int = Field(description="Position of the book within the series")


class Member(MemberBase, table=True):
    """Persistent series member in database.

    Table: members
    """

    __tablename__ = "members"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    version: int = Field(default=0)
    published: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated: datetime = Field(default_factory=utc_now, sa_type=TimestampType)

    def __repr__(self) -> str:
        return f"Member(id={self.id}, series_id={self.series_id}, book_id={self.book_id}, ordinal={self.ordinal})"
