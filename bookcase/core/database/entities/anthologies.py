"""
Anthology entity model.

An anthology belongs to an author and collects books through stories.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from bookcase.core.models.enums import Location

from ..base import Base, IdType, TimestampType, utc_now


class AnthologyBase(Base):
    """Base fields for an anthology."""

    author_id: int = Field(foreign_key="authors.id", ondelete="CASCADE", index=True, sa_type=IdType)
    title: str = Field(index=True, description="Anthology title")
    location: Location = Field(default=Location.OTHER, description="Where the copy lives")
    notes: Optional[str] = Field(default=None, description="Free text notes")
    read: bool = Field(default=False, description="Whether the anthology has been read")


class Anthology(AnthologyBase, table=True):
    """Persistent anthology in database.

    Table: anthologies
    """

    __tablename__ = "anthologies"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    version: int = Field(default=0)
    published: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated: datetime = Field(default_factory=utc_now, sa_type=TimestampType)

    def __repr__(self) -> str:
        return f"Anthology(id={self.id}, title={self.title}, author_id={self.author_id})"
