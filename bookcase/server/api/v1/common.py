"""
Helpers shared by the entity routers.
"""

from typing import Any, Dict, Optional, Tuple

from fastapi import Query

from bookcase.core.database.base import MAX_ID
from bookcase.core.exceptions import BadRequest
from bookcase.core.models.io import VersionedUpdate


class Page:
    """Pagination query parameters (``limit``/``offset``)."""

    def __init__(
        self,
        limit: Optional[int] = Query(default=None, ge=1, le=MAX_ID, description="Maximum number of records to return"),
        offset: Optional[int] = Query(default=None, ge=0, le=MAX_ID, description="Number of records to skip"),
    ) -> None:
        self.limit = limit
        self.offset = offset


def update_values(entity_id: int, payload: VersionedUpdate) -> Tuple[Dict[str, Any], Optional[int]]:
    """Split a PUT body into the field values to write and the expected version.

    Args:
        entity_id: Identifier taken from the path
        payload: Validated request body

    Returns:
        Tuple of (field values, expected version or None)

    Raises:
        BadRequest: The body names a different identifier than the path
    """
    if payload.id is not None and payload.id != entity_id:
        raise BadRequest(f"Body id {payload.id} does not match path id {entity_id}")
    return payload.model_dump(exclude={"id", "version"}), payload.version
