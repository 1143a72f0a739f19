"""
Bookcase client library.

Synchronous httpx clients for the Bookcase REST API. Responses are parsed
into the models of :mod:`bookcase.client.models`; error responses are raised
as the exceptions of :mod:`bookcase.core.exceptions`.
"""

from bookcase.core.exceptions import BadRequest, BookcaseError, NotFound, NotUnique, VersionConflict

from .base import BaseClient
from .bookcase import BookcaseClient
from .clients import AnthologyClient, AuthorClient, BookClient, MemberClient, SeriesClient, StoryClient
from .config import ClientSettings
from .models import Anthology, Author, Book, Entity, Member, Series, Story

__all__ = [
    "BaseClient",
    "BookcaseClient",
    "ClientSettings",
    "AuthorClient",
    "BookClient",
    "SeriesClient",
    "AnthologyClient",
    "MemberClient",
    "StoryClient",
    "Entity",
    "Author",
    "Book",
    "Series",
    "Anthology",
    "Member",
    "Story",
    "BookcaseError",
    "BadRequest",
    "NotFound",
    "NotUnique",
    "VersionConflict",
]
