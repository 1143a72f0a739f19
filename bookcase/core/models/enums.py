"""Enumerations shared by entities, I/O schemas and client models."""

from __future__ import annotations

from enum import Enum


class Location(str, Enum):
    """Where a physical or electronic copy of a book lives."""

    AUDIBLE = "AUDIBLE"
    BOX = "BOX"
    KINDLE = "KINDLE"
    LIBRARY = "LIBRARY"
    OTHER = "OTHER"
    SHELF = "SHELF"
