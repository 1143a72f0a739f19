from typing import AsyncGenerator, Dict

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.database import build_repos, create_all, create_engine, create_sessionmaker
from bookcase.core.database.seed import populate

# Use in-memory SQLite for testing; StaticPool keeps one shared connection
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh catalog database for each test."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(test_engine):
    return create_sessionmaker(test_engine)


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the test database.

    Each request gets its own session, as in production. The lifespan does
    not run under ``ASGITransport``, so the app's global engine is unused.
    """
    from bookcase.core.database.session import get_session
    from bookcase.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def catalog(session_maker) -> Dict[str, Dict]:
    """Load the demo catalog and index its ids by natural key.

    Returns a mapping with ``authors`` keyed by ``"First Last"`` and
    ``books``/``series``/``anthologies`` keyed by title.
    """
    async with session_maker() as session:
        await populate(session)
        repos = build_repos(session)
        return {
            "authors": {f"{a.first_name} {a.last_name}": a.id for a in await repos.authors.list()},
            "books": {b.title: b.id for b in await repos.books.list()},
            "series": {s.title: s.id for s in await repos.series.list()},
            "anthologies": {a.title: a.id for a in await repos.anthologies.list()},
        }
