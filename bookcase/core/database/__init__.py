"""
Catalog database layer for Bookcase.

This package provides a unified location for all database entities and repositories.

Structure:
- entities/: One SQLModel table per catalog entity
- repositories/: Data access layer, one repository per entity
- seed.py: Demo catalog populate/depopulate
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session, repo bundle)

``session`` is not imported here because it builds the global engine from the
server settings; import it explicitly where a server-bound session is needed.
"""

from .base import Base
from .utils import (
    RepoBundle,
    build_repos,
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "RepoBundle",
    "build_repos",
    "create_all",
    "create_engine",
    "create_sessionmaker",
]
