"""
Database entity models.

This package contains the catalog entity models, one module per table:

- authors: Authors, the root of the ownership tree
- books: Books owned by an author
- series: Series owned by an author
- anthologies: Anthologies owned by an author
- members: Books placed in a series
- stories: Books placed in an anthology
"""

from .anthologies import Anthology
from .authors import Author
from .books import Book
from .members import Member
from .series import Series
from .stories import Story

__all__ = [
    "Anthology",
    "Author",
    "Book",
    "Member",
    "Series",
    "Story",
]
