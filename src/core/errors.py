"""Strata exception hierarchy.

This module defines traceable library errors with clear boundaries.
Each component raises a specific error type for debuggability.
"""

from __future__ import annotations


class StrataError(Exception):
    """Base exception for all Strata failures."""


class StrataConfigError(StrataError):
    """Raised for invalid runtime configuration."""


class StrataStoreError(StrataError):
    """Raised for typed store builder misuse."""


class StrataIndexError(StrataError, IndexError):
    """Raised for out-of-range positional access."""


class StrataTypeQueryError(StrataError, TypeError):
    """Raised when a type query is not a class."""
