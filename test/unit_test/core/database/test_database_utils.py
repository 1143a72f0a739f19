"""Unit tests for engine and session helpers."""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from bookcase.core.database import RepoBundle, build_repos, create_engine, create_sessionmaker
from bookcase.core.database.repositories import AuthorRepository, StoryRepository


class TestCreateEngine:
    @pytest.mark.parametrize(
        "url,driver",
        [
            ("sqlite:///:memory:", "aiosqlite"),
            ("sqlite+pysqlite:///:memory:", "aiosqlite"),
            ("sqlite+aiosqlite:///:memory:", "aiosqlite"),
        ],
    )
    async def test_sqlite_urls_use_aiosqlite(self, url, driver):
        engine = create_engine(url)
        try:
            assert engine.url.drivername == f"sqlite+{driver}"
            assert isinstance(engine.pool, StaticPool)
        finally:
            await engine.dispose()

    async def test_file_sqlite_does_not_pin_connection(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path}/catalog.db")
        try:
            assert engine.url.drivername == "sqlite+aiosqlite"
            assert not isinstance(engine.pool, StaticPool)
        finally:
            await engine.dispose()

    @pytest.mark.parametrize(
        "url",
        [
            "postgres://user:pw@localhost/bookcase",
            "postgresql://user:pw@localhost/bookcase",
            "postgresql+psycopg2://user:pw@localhost/bookcase",
        ],
    )
    async def test_postgres_urls_use_asyncpg(self, url):
        engine = create_engine(url)
        try:
            assert engine.url.drivername == "postgresql+asyncpg"
        finally:
            await engine.dispose()


class TestSessions:
    async def test_sessionmaker_keeps_objects_after_commit(self, in_memory_engine):
        maker = create_sessionmaker(in_memory_engine)

        async with maker() as session:
            assert isinstance(session, AsyncSession)
            assert session.sync_session.expire_on_commit is False

    async def test_build_repos_shares_session(self, in_memory_session):
        repos = build_repos(in_memory_session)

        assert isinstance(repos, RepoBundle)
        assert isinstance(repos.authors, AuthorRepository)
        assert isinstance(repos.stories, StoryRepository)
        assert all(
            repo.session is in_memory_session
            for repo in (repos.authors, repos.books, repos.series, repos.anthologies, repos.members, repos.stories)
        )
