"""
Base repository and query utilities.

This module provides the async CRUD implementation shared by every catalog
repository. Concrete repositories plug in ordering, filtering, validation and
cascade rules through small hooks.

Write semantics:
- ``create`` stamps ``version=0`` and ``published``/``updated``.
- ``update`` is optimistic: it issues ``UPDATE ... WHERE id AND version``,
  bumps the version and refreshes ``updated``.
- ``delete`` removes dependents first, then the row itself.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy import update as sa_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from bookcase.core.exceptions import BadRequest, NotFound, NotUnique, VersionConflict
from bookcase.core.logging_config import get_logger

from ..base import is_storable_id, utc_now

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)

# Columns managed by the repository, never taken from caller values
MANAGED_FIELDS = frozenset({"id", "version", "published", "updated"})


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[SQLModel], filters: Mapping[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        Unknown keys and ``None`` values are ignored.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_contains(stmt, column, value: Optional[str]):
        """Apply a case-insensitive substring match on one column."""
        if value:
            stmt = stmt.where(column.ilike(f"%{value}%"))
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt


class AsyncBaseRepository(Generic[EntityType]):
    """Async repository with the common CRUD operations using SQLModel."""

    #: Name used in error messages, e.g. "Author"
    label: str = "Entity"

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _ordering(self) -> Sequence[Any]:
        """Columns for the natural listing order."""
        return (self.model.id,)

    def _apply_filters(self, stmt, filters: Mapping[str, Any]):
        return QueryBuilder.apply_filters(stmt, self.model, filters)

    async def _validate(self, data: Mapping[str, Any], entity_id: Optional[int] = None) -> None:
        """Check foreign keys and uniqueness before a write.

        Args:
            data: Field values that are about to be written
            entity_id: Identifier of the row being updated, None on create

        Raises:
            BadRequest: A required value is missing or a parent does not exist
            NotUnique: The write would duplicate a natural key
        """

    async def _delete_dependents(self, entity_id: int) -> None:
        """Remove rows that depend on the entity about to be deleted."""

    # ------------------------------------------------------------------
    # Helpers for hooks
    # ------------------------------------------------------------------

    async def _require_text(self, data: Mapping[str, Any], field: str) -> None:
        value = data.get(field)
        if value is None or not str(value).strip():
            raise BadRequest(f"{self.label} {field} is required")

    async def _require_parent(self, data: Mapping[str, Any], field: str, parent: Type[SQLModel]) -> None:
        value = data.get(field)
        if value is None:
            raise BadRequest(f"{self.label} {field} is required")
        if not is_storable_id(value):
            raise BadRequest(f"{self.label} {field} {value} is not a valid identifier")
        if await self.session.get(parent, value) is None:
            raise BadRequest(f"{self.label} {field} {value} does not identify an existing {parent.__name__}")

    async def _delete_where(self, model: Type[SQLModel], *criteria) -> None:
        stmt = sa_delete(model).where(*criteria).execution_options(synchronize_session=False)
        await self.session.execute(stmt)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        if not is_storable_id(entity_id):
            return None
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[EntityType]:
        """List entities in natural order with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """
        stmt = select(self.model)
        if filters:
            stmt = self._apply_filters(stmt, filters)
        stmt = stmt.order_by(*self._ordering())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """
        await self._validate(entity.model_dump())

        now = utc_now()
        entity.id = None
        entity.version = 0
        entity.published = now
        entity.updated = now

        self.session.add(entity)
        await self._commit()
        await self.session.refresh(entity)
        logger.debug(f"Created {entity!r}")
        return entity

    async def update(
        self,
        entity_id: int,
        values: Mapping[str, Any],
        version: Optional[int] = None,
    ) -> EntityType:
        """Update an existing entity record.

        Args:
            entity_id: Primary key of the row to update
            values: New field values; managed fields are ignored
            version: Version the caller last saw, checked when given

        Returns:
            Updated entity instance

        Raises:
            NotFound: No row has this identifier
            BadRequest: Validation failed
            NotUnique: The write would duplicate a natural key
            VersionConflict: The row changed since ``version`` was read
        """
        current = await self.get_by_id(entity_id)
        if current is None:
            raise NotFound(f"{self.label} {entity_id} not found")

        changes = {key: value for key, value in values.items() if key not in MANAGED_FIELDS}
        await self._validate({**current.model_dump(), **changes}, entity_id=entity_id)

        expected = current.version
        if version is not None and version != expected:
            raise VersionConflict(
                f"{self.label} {entity_id} is at version {expected}, not {version}",
                details={"expected": expected, "submitted": version},
            )

        stmt = (
            sa_update(self.model)
            .where(self.model.id == entity_id, self.model.version == expected)
            .values(**changes, version=expected + 1, updated=utc_now())
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            await self.session.rollback()
            raise self._not_unique(e) from e
        if result.rowcount == 0:
            await self.session.rollback()
            raise VersionConflict(f"{self.label} {entity_id} was modified concurrently")

        await self._commit()
        await self.session.refresh(current)
        logger.debug(f"Updated {current!r}")
        return current

    async def delete(self, entity_id: int) -> bool:
        """Delete entity and its dependents by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False

        await self._delete_dependents(entity_id)
        await self.session.delete(entity)
        await self.session.commit()
        logger.debug(f"Deleted {entity!r}")
        return True

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise self._not_unique(e) from e

    def _not_unique(self, error: IntegrityError) -> NotUnique:
        logger.warning(f"Integrity error on {self.label}: {error.orig}")
        return NotUnique(f"{self.label} violates a uniqueness constraint", details=str(error.orig))
