"""
Author entity model.

Authors are the root of the catalog: they own books, series and
anthologies. First and last name together form the natural key.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, IdType, TimestampType, utc_now


class AuthorBase(Base):
    """Base fields for an author."""

    first_name: str = Field(index=True, description="Author first name")
    last_name: str = Field(index=True, description="Author last name")
    notes: Optional[str] = Field(default=None, description="Free text notes")


class Author(AuthorBase, table=True):
    """Persistent author in database.

    Table: authors
    """

    __tablename__ = "authors"
    __table_args__ = (
        UniqueConstraint("first_name", "last_name", name="uq_authors_name"),
        {"extend_existing": True},
    )

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True, sa_type=IdType)

    # Optimistic version and timestamps
    version: int = Field(default=0)
    published: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
    updated: datetime = Field(default_factory=utc_now, sa_type=TimestampType)

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name={self.last_name}|{self.first_name}, version={self.version})"
