"""
Demo catalog seed data.

The demo catalog is a small Bedrock library: Flintstone and Rubble authors
with books, series (with members) and anthologies (with stories). Every
series has at least one member and every anthology at least one story.

Functions:
- populate: Load the demo catalog through the repositories
- depopulate: Remove every catalog row, children first
- is_empty: Whether the catalog has no authors
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bookcase.core.logging_config import get_logger
from bookcase.core.models.enums import Location

from .entities import Anthology, Author, Book, Member, Series, Story
from .utils import build_repos

logger = get_logger(__name__)

AuthorKey = Tuple[str, str]

AUTHORS: List[Tuple[str, str, str]] = [
    ("Fred", "Flintstone", "Notes about Fred Flintstone"),
    ("Wilma", "Flintstone", "Notes about Wilma Flintstone"),
    ("Pebbles", "Flintstone", "Notes about Pebbles Flintstone"),
    ("Barney", "Rubble", "Notes about Barney Rubble"),
    ("Betty", "Rubble", "Notes about Betty Rubble"),
    ("Bam Bam", "Rubble", "Notes about Bam Bam Rubble"),
]

BOOKS: Dict[AuthorKey, List[Tuple[str, Location, bool]]] = {
    ("Fred", "Flintstone"): [
        ("A Stone Age Tale by Fred", Location.SHELF, True),
        ("Bedrock Nights by Fred", Location.KINDLE, True),
        ("Brontosaurus Burgers by Fred", Location.BOX, False),
    ],
    ("Wilma", "Flintstone"): [
        ("Cave Decorating by Wilma", Location.LIBRARY, True),
        ("Dinosaur Gardens by Wilma", Location.AUDIBLE, False),
    ],
    ("Barney", "Rubble"): [
        ("Dino Days by Barney", Location.KINDLE, True),
        ("Quarry Stories by Barney", Location.SHELF, False),
        ("Rock Solid by Barney", Location.OTHER, False),
    ],
    ("Betty", "Rubble"): [
        ("Pebble Beach by Betty", Location.AUDIBLE, True),
    ],
}

# (author, series title, book titles in reading order)
SERIES: List[Tuple[AuthorKey, str, List[str]]] = [
    (
        ("Fred", "Flintstone"),
        "The Bedrock Series by Fred",
        ["Bedrock Nights by Fred", "A Stone Age Tale by Fred", "Brontosaurus Burgers by Fred"],
    ),
    (
        ("Barney", "Rubble"),
        "The Quarry Series by Barney",
        ["Dino Days by Barney", "Rock Solid by Barney"],
    ),
]

# (author, anthology title, location, book titles in table-of-contents order)
ANTHOLOGIES: List[Tuple[AuthorKey, str, Location, List[str]]] = [
    (
        ("Wilma", "Flintstone"),
        "Collected Works by Wilma",
        Location.SHELF,
        ["Cave Decorating by Wilma", "Dinosaur Gardens by Wilma"],
    ),
    (
        ("Barney", "Rubble"),
        "Tales from Bedrock by Barney",
        Location.KINDLE,
        ["Quarry Stories by Barney", "Dino Days by Barney", "Pebble Beach by Betty"],
    ),
]


async def is_empty(session: AsyncSession) -> bool:
    """Whether the catalog has no authors.

    Args:
        session: Async database session

    Returns:
        True when no author exists
    """
    result = await session.execute(select(Author.id).limit(1))
    return result.scalar_one_or_none() is None


async def populate(session: AsyncSession) -> None:
    """Load the demo catalog.

    Rows are created through the repositories, so they carry the same
    validation, versions and timestamps as rows created through the API.

    Args:
        session: Async database session
    """
    repos = build_repos(session)

    authors: Dict[AuthorKey, Author] = {}
    for first_name, last_name, notes in AUTHORS:
        author = await repos.authors.create(Author(first_name=first_name, last_name=last_name, notes=notes))
        authors[(first_name, last_name)] = author

    books: Dict[str, Book] = {}
    for key, titles in BOOKS.items():
        for title, location, read in titles:
            book = await repos.books.create(
                Book(
                    author_id=authors[key].id,
                    title=title,
                    location=location,
                    notes=f"Notes about {title}",
                    read=read,
                )
            )
            books[title] = book

    for key, title, book_titles in SERIES:
        series = await repos.series.create(
            Series(author_id=authors[key].id, title=title, notes=f"Notes about {title}")
        )
        for ordinal, book_title in enumerate(book_titles, start=1):
            await repos.members.create(Member(series_id=series.id, book_id=books[book_title].id, ordinal=ordinal))

    for key, title, location, book_titles in ANTHOLOGIES:
        anthology = await repos.anthologies.create(
            Anthology(
                author_id=authors[key].id,
                title=title,
                location=location,
                notes=f"Notes about {title}",
                read=False,
            )
        )
        for ordinal, book_title in enumerate(book_titles, start=1):
            await repos.stories.create(
                Story(anthology_id=anthology.id, book_id=books[book_title].id, ordinal=ordinal)
            )

    logger.info(
        f"Demo catalog loaded: {len(authors)} authors, {len(books)} books, "
        f"{len(SERIES)} series, {len(ANTHOLOGIES)} anthologies"
    )


async def depopulate(session: AsyncSession) -> None:
    """Remove every catalog row, children first.

    Args:
        session: Async database session
    """
    for model in (Story, Member, Anthology, Series, Book, Author):
        await session.execute(delete(model))
    await session.commit()
    logger.info("Catalog emptied")
