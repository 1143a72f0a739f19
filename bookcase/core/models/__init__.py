"""Shared enumerations and API I/O schemas."""

from __future__ import annotations

from .enums import Location

__all__ = ["Location"]
