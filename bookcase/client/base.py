from __future__ import annotations

from typing import Any, Generic, List, Optional, Type, TypeVar

import httpx

from bookcase.core.exceptions import BookcaseError, NotFound, error_for
from bookcase.core.logging_config import get_logger

from .models import Entity

ModelT = TypeVar("ModelT", bound=Entity)

# Server-managed fields never sent on insert
_INSERT_EXCLUDE = {"id", "version", "published", "updated"}
# Timestamps are always set by the server
_UPDATE_EXCLUDE = {"published", "updated"}


class BaseClient(Generic[ModelT]):
    """
    Thin HTTP client for one catalog resource of the Bookcase API.

    Responsibilities:
    - find / find_all
    - insert / update / delete

    Error responses are raised as the matching ``bookcase.core.exceptions``
    class, selected by the ``error_type`` the server reports.
    """

    model: Type[ModelT]
    resource: str

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._logger = get_logger(__name__)

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.resource}"

    def close(self) -> None:
        self._client.close()

    def find(self, entity_id: int) -> ModelT:
        """Fetch one entity by id; raises ``NotFound`` when it does not exist."""
        r = self._request("GET", f"{self.url}/{entity_id}")
        return self.model.model_validate(r.json())

    def find_all(self, **filters: Any) -> List[ModelT]:
        """List entities in the server's order, narrowed by query filters.

        ``None`` filter values are dropped; ``limit`` and ``offset`` page the
        result.
        """
        params = {k: v for k, v in filters.items() if v is not None}
        r = self._request("GET", self.url, params=params or None)
        items = [self.model.model_validate(item) for item in r.json()]
        self._logger.debug("%s.find_all: got %d %s", type(self).__name__, len(items), self.resource)
        return items

    def insert(self, entity: ModelT) -> ModelT:
        """Create ``entity`` and return it as stored (with id and version 0)."""
        body = entity.model_dump(mode="json", exclude=_INSERT_EXCLUDE, exclude_none=True)
        r = self._request("POST", self.url, json=body)
        return self.model.model_validate(r.json())

    def update(self, entity: ModelT) -> ModelT:
        """Replace the stored entity with ``entity`` and return the new state.

        A set ``version`` must still match the stored one, otherwise the server
        rejects the update with ``VersionConflict``.
        """
        if entity.id is None:
            raise NotFound(f"Cannot update {self.resource} entity without an id")
        body = entity.model_dump(mode="json", exclude=_UPDATE_EXCLUDE, exclude_none=True)
        r = self._request("PUT", f"{self.url}/{entity.id}", json=body)
        return self.model.model_validate(r.json())

    def delete(self, entity_id: int) -> None:
        """Delete one entity (and whatever the server cascades to)."""
        self._request("DELETE", f"{self.url}/{entity_id}")

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        self._logger.debug("%s: %s %s %s", type(self).__name__, method, url, kwargs.get("params") or "")
        try:
            r = self._client.request(method, url, **kwargs)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._error(e.response) from e
        return r

    def _error(self, response: httpx.Response) -> BookcaseError:
        error_type: Optional[str] = None
        message: Optional[str] = None
        details: Any = response.text
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error_type = body.get("error_type")
            details = body.get("detail", body)
            if isinstance(details, str):
                message = details
        if message is None:
            message = f"{response.request.method} {response.request.url} failed: {response.status_code}"
        self._logger.debug(
            "%s: %s (%s) %s", type(self).__name__, response.status_code, error_type or "untyped", message
        )
        return error_for(response.status_code, error_type, message, details)
