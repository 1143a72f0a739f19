"""
Exception handlers for the Bookcase server.

This package maps domain errors, request validation failures and unhandled
exceptions to JSON error responses.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
