"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Each entity has three schemas:
- ``*Create``: body of POST
- ``*Update``: body of PUT (adds optional ``id`` and ``version``)
- ``*Read``: response body
"""

from .anthologies import AnthologyCreate, AnthologyRead, AnthologyUpdate
from .authors import AuthorCreate, AuthorRead, AuthorUpdate
from .books import BookCreate, BookRead, BookUpdate
from .common import EntityRead, VersionedUpdate
from .members import MemberCreate, MemberRead, MemberUpdate
from .series import SeriesCreate, SeriesRead, SeriesUpdate
from .stories import StoryCreate, StoryRead, StoryUpdate

__all__ = [
    "AnthologyCreate",
    "AnthologyRead",
    "AnthologyUpdate",
    "AuthorCreate",
    "AuthorRead",
    "AuthorUpdate",
    "BookCreate",
    "BookRead",
    "BookUpdate",
    "EntityRead",
    "MemberCreate",
    "MemberRead",
    "MemberUpdate",
    "SeriesCreate",
    "SeriesRead",
    "SeriesUpdate",
    "StoryCreate",
    "StoryRead",
    "StoryUpdate",
    "VersionedUpdate",
]
