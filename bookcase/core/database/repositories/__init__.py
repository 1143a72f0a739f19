"""
Database repository layer using SQLModel.

This package contains one repository per catalog entity. All repositories
share the async CRUD implementation of ``AsyncBaseRepository``:

- Type-safe ORM operations with Pydantic validation
- Optimistic versioning on update
- Explicit cascades on delete
- Query building utilities for filtering and pagination
"""

from .anthologies import AnthologyRepository
from .authors import AuthorRepository
from .base import AsyncBaseRepository, QueryBuilder
from .books import BookRepository
from .members import MemberRepository
from .series import SeriesRepository
from .stories import StoryRepository

__all__ = [
    "AnthologyRepository",
    "AsyncBaseRepository",
    "AuthorRepository",
    "BookRepository",
    "MemberRepository",
    "QueryBuilder",
    "SeriesRepository",
    "StoryRepository",
]
