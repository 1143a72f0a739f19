"""Fixtures running the client library against the real application.

The app is driven through Starlette's ``TestClient`` (an ``httpx.Client``),
backed by a SQLite file that is re-populated with the demo catalog before
every test. ``NullPool`` opens a fresh connection per session, so the
database can be prepared here and used from the test client's event loop.
"""

from __future__ import annotations

import asyncio
from typing import AsyncGenerator, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from bookcase.client import BookcaseClient
from bookcase.core.database import create_all, create_sessionmaker
from bookcase.core.database.seed import depopulate, populate
from bookcase.core.database.session import get_session
from bookcase.server.main import app


@pytest.fixture
def session_maker(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/bookcase.db", poolclass=NullPool)
    maker = create_sessionmaker(engine)

    async def _prepare() -> None:
        await create_all(engine)
        async with maker() as session:
            await depopulate(session)
            await populate(session)

    asyncio.run(_prepare())
    yield maker
    asyncio.run(engine.dispose())


@pytest.fixture
def bookcase(session_maker) -> Iterator[BookcaseClient]:
    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    test_client = TestClient(app)
    try:
        with BookcaseClient("http://testserver/api/v1", client=test_client) as client:
            yield client
    finally:
        test_client.close()
        app.dependency_overrides.clear()
