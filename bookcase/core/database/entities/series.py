"""
Series entity model.

A series belongs to an author and groups books through members.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, IdType, TimestampType, utc_now


class SeriesBase(Base):
    """Base fields for a series."""

    author_id: int = Field(foreign_key="authors.id", ondelete="CASCADE", index=True, sa_type=IdType)
    title: str = Field(index=True, description="Series title")
    notes: Optional[str] = Field(default=None, description="Free text notes")


class Series(SeriesBase, table=True):
    """Persistent series in database.

    Table: series
    """

    __tablename__ = "series"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    version: int = Field(default=0)
    published: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated: datetime = Field(default_factory=utc_now, sa_type=TimestampType)

    def __repr__(self) -> str:
        return f"Series(id={self.id}, title={self.title}, author_id={self.author_id})"
