"""Key/value coupling types.

``Pair`` is the immutable form used in store results; ``KeyValue`` is
its mutable counterpart for callers that rebind either side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Pair(Generic[K, V]):
    """Immutable mapping between two objects.

    Attributes:
        key: The key object.
        value: The value object.
    """

    key: K
    value: V

    @classmethod
    def of(cls, key: K, value: V) -> "Pair[K, V]":
        """Create a pair from two objects."""
        return cls(key, value)

    @classmethod
    def from_item(cls, item: tuple[K, V]) -> "Pair[K, V]":
        """Create a pair from a ``(key, value)`` tuple such as ``dict.items()`` rows."""
        key, value = item
        return cls(key, value)

    def as_tuple(self) -> tuple[K, V]:
        """Return the pair as a ``(key, value)`` tuple."""
        return (self.key, self.value)


@dataclass
class KeyValue(Generic[K, V]):
    """Mutable mapping between two objects.

    Attributes:
        key: The key object.
        value: The value object.
    """

    key: K
    value: V

    @classmethod
    def of(cls, key: K, value: V) -> "KeyValue[K, V]":
        """Create a key/value mapping from two objects."""
        return cls(key, value)

    def set_key(self, key: K) -> K:
        """Replace the key and return the previous one."""
        previous = self.key
        self.key = key
        return previous

    def set_value(self, value: V) -> V:
        """Replace the value and return the previous one."""
        previous = self.value
        self.value = value
        return previous

    def as_tuple(self) -> tuple[K, V]:
        """Return the mapping as a ``(key, value)`` tuple."""
        return (self.key, self.value)
