"""Shared typed models.

This module defines the immutable records exchanged between stores,
layer sets, and coupling helpers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Entry:
    """One stored value inside a typed store.

    Attributes:
        value: Opaque stored value, shared with the caller.
        type_tag: Canonical type computed when the value was inserted.
        position: Zero-based insertion position.
        key: String key for keyed stores, None for positional stores.
    """

    value: Any
    type_tag: type
    position: int
    key: str | None = None


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Result of a single-value query.

    A lookup distinguishes "not found" from "found a falsy value":
    ``bool(lookup)`` reflects ``present`` only, never ``value``.

    Attributes:
        present: Whether a match was found.
        value: Matched value, None when absent.
        key: Key of the matched entry for keyed stores.
        position: Position of the matched entry, when it came from a store.
    """

    present: bool
    value: T | None = None
    key: str | None = None
    position: int | None = None

    @classmethod
    def of(cls, value: T, key: str | None = None, position: int | None = None) -> "Lookup[T]":
        """Build a present lookup around a value."""
        return cls(present=True, value=value, key=key, position=position)

    @classmethod
    def from_entry(cls, entry: Entry) -> "Lookup[Any]":
        """Build a present lookup from a stored entry."""
        return cls(present=True, value=entry.value, key=entry.key, position=entry.position)

    def __bool__(self) -> bool:
        return self.present

    def value_or(self, default: T) -> T:
        """Return the matched value, or ``default`` when absent."""
        if self.present:
            return self.value  # type: ignore[return-value]
        return default


ABSENT: Lookup[Any] = Lookup(present=False)
