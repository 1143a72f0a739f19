"""
Database utility functions for engine and session management.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata
- build_repos: Builds the repository bundle for one session
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from . import entities  # noqa: F401  (registers tables on Base.metadata)
from .base import Base
from .repositories import (
    AnthologyRepository,
    AuthorRepository,
    BookRepository,
    MemberRepository,
    SeriesRepository,
    StoryRepository,
)


def create_engine(db_url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The helper normalizes Postgres URLs to ensure the async driver is used.
    For example, it rewrites ``postgresql://`` and other variants to
    ``postgresql+asyncpg://``. SQLite URLs are switched to ``aiosqlite``;
    an in-memory SQLite database is pinned to a single connection so that
    every session sees the same tables.

    Args:
        db_url: Database connection URL

    Returns:
        Configured AsyncEngine instance
    """
    url = re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)
    url = re.sub(r"^sqlite(?:\+[a-z0-9_]+)?://", "sqlite+aiosqlite://", url, count=1)

    if url.startswith("sqlite"):
        if ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"):
            return create_async_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_async_engine(url, connect_args={"check_same_thread": False})
    return create_async_engine(url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all catalog repositories for one session."""

    authors: AuthorRepository
    books: BookRepository
    series: SeriesRepository
    anthologies: AnthologyRepository
    members: MemberRepository
    stories: StoryRepository


def build_repos(session: AsyncSession) -> RepoBundle:
    """Build a ``RepoBundle`` sharing a single session.

    Args:
        session: Async session used by every repository

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        authors=AuthorRepository(session),
        books=BookRepository(session),
        series=SeriesRepository(session),
        anthologies=AnthologyRepository(session),
        members=MemberRepository(session),
        stories=StoryRepository(session),
    )
