"""Test configuration for database unit tests.

Every test gets a fresh in-memory SQLite catalog. ``seeded_session`` loads
the demo catalog first.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from bookcase.core.database import RepoBundle, build_repos, create_all, create_engine, create_sessionmaker
from bookcase.core.database.seed import populate


@pytest.fixture
async def in_memory_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with all catalog tables."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def in_memory_session(in_memory_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture
async def seeded_session(in_memory_session: AsyncSession) -> AsyncSession:
    """Session over a catalog holding the demo data."""
    await populate(in_memory_session)
    return in_memory_session


@pytest.fixture
def repos(in_memory_session: AsyncSession) -> RepoBundle:
    return build_repos(in_memory_session)


@pytest.fixture
def sample_author_data() -> dict:
    return {"first_name": "Dino", "last_name": "Saur", "notes": "Family pet"}
