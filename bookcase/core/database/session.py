"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the server for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from bookcase.core.logging_config import get_logger
from bookcase.server.core.config import settings

from .seed import is_empty, populate
from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db(seed: bool = False) -> None:
    """
    Initialize the database.

    Creates all catalog tables that do not exist yet and, when ``seed`` is
    set, loads the demo catalog into an empty database.

    Args:
        seed: Whether to load the demo catalog
    """
    await create_all(engine)
    if not seed:
        return
    async with async_session_maker() as session:
        if await is_empty(session):
            await populate(session)
        else:
            logger.info("Catalog already has data, skipping seed")
