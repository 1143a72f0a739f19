"""Error types shared by the Bookcase server and client.

Purpose:
- Provide typed exceptions raised by repositories and routers on the server
  side, and re-raised by the client library when the server reports them.
- Expose HTTP-oriented context (status code, error body) for diagnosis.

Usage:
- Catch `BookcaseError` for general failures and inspect `status_code` or
  `details`.
- Catch `BadRequest`, `NotFound`, `NotUnique` or `VersionConflict` for the
  specific failure kinds.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type


class BookcaseError(Exception):
    """Base error for Bookcase failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional structured payload (e.g., validation errors).
    """

    status_code: int = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class BadRequest(BookcaseError):
    """Raised when input fails validation (HTTP 400).

    Covers missing or invalid required fields and foreign keys that name
    a parent which does not exist.
    """

    status_code = 400


class NotFound(BookcaseError):
    """Raised when the requested entity cannot be found (HTTP 404)."""

    status_code = 404


class NotUnique(BookcaseError):
    """Raised when a write would duplicate a natural key (HTTP 409)."""

    status_code = 409


class VersionConflict(BookcaseError):
    """Raised when the submitted version no longer matches the stored one (HTTP 409)."""

    status_code = 409


_BY_NAME: Dict[str, Type[BookcaseError]] = {
    cls.__name__: cls for cls in (BadRequest, NotFound, NotUnique, VersionConflict)
}

_BY_STATUS: Dict[int, Type[BookcaseError]] = {
    400: BadRequest,
    404: NotFound,
    409: NotUnique,
}


def error_for(
    status_code: int,
    error_type: Optional[str] = None,
    message: Optional[str] = None,
    details: Optional[Any] = None,
) -> BookcaseError:
    """Build the exception matching an error response.

    The reported ``error_type`` wins over the status code, so a 409 can be
    told apart as ``NotUnique`` or ``VersionConflict``.

    Args:
        status_code: HTTP status code of the response.
        error_type: Exception class name reported by the server, if any.
        message: Human-readable message.
        details: Raw error payload.

    Returns:
        An exception instance (not raised).
    """
    cls = _BY_NAME.get(error_type or "") or _BY_STATUS.get(status_code, BookcaseError)
    return cls(message or f"Request failed with status {status_code}", status_code=status_code, details=details)
