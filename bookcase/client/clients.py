"""One client per catalog resource, each adding its finder shortcuts."""

from __future__ import annotations

from typing import List

from .base import BaseClient, ModelT
from .models import Anthology, Author, Book, Member, Series, Story


class AuthorClient(BaseClient[Author]):
    model = Author
    resource = "authors"

    def find_by_name(self, name: str) -> List[Author]:
        """Authors whose first or last name contains ``name`` (case-insensitive)."""
        return self.find_all(name=name)


class _TitledClient(BaseClient[ModelT]):
    """Finders shared by the author-owned, titled resources."""

    def find_by_title(self, title: str) -> List[ModelT]:
        """Entities whose title contains ``title`` (case-insensitive)."""
        return self.find_all(title=title)

    def find_by_author_id(self, author_id: int) -> List[ModelT]:
        return self.find_all(author_id=author_id)


class BookClient(_TitledClient[Book]):
    model = Book
    resource = "books"


class SeriesClient(_TitledClient[Series]):
    model = Series
    resource = "series"


class AnthologyClient(_TitledClient[Anthology]):
    model = Anthology
    resource = "anthologies"


class MemberClient(BaseClient[Member]):
    model = Member
    resource = "members"

    def find_by_series_id(self, series_id: int) -> List[Member]:
        """Members of one series, in ordinal order."""
        return self.find_all(series_id=series_id)

    def find_by_book_id(self, book_id: int) -> List[Member]:
        return self.find_all(book_id=book_id)


class StoryClient(BaseClient[Story]):
    model = Story
    resource = "stories"

    def find_by_anthology_id(self, anthology_id: int) -> List[Story]:
        """Stories of one anthology, in ordinal order."""
        return self.find_all(anthology_id=anthology_id)

    def find_by_book_id(self, book_id: int) -> List[Story]:
        return self.find_all(book_id=book_id)
