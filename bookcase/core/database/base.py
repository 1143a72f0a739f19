"""
Shared pieces of the catalog tables.

Every entity derives from ``Base`` and stamps its bookkeeping timestamps with
``utc_now``. Timestamps are stored as naive UTC in plain ``DateTime`` columns
so they compare equal after a round trip through SQLite.

Identifiers and foreign keys are 64-bit (``BIGINT``). SQLite keeps them as
``INTEGER`` so the primary key remains an alias of the rowid and is assigned
automatically.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlalchemy import BigInteger, DateTime, Integer
from sqlmodel import SQLModel

# Largest identifier a BIGINT column can hold
MAX_ID = 2**63 - 1

IdType = BigInteger().with_variant(Integer(), "sqlite")
TimestampType = DateTime(timezone=False)


class Base(SQLModel):
    """Common parent of the catalog entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Current time in UTC, without tzinfo."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_storable_id(value: object) -> bool:
    """Whether ``value`` can name a row, i.e. is an int in ``1..MAX_ID``."""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_ID
