"""Three-object coupling type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Triple(Generic[A, B, C]):
    """Immutable group of three objects.

    Attributes:
        a: First object.
        b: Second object.
        c: Third object.
    """

    a: A
    b: B
    c: C

    @classmethod
    def of(cls, a: A, b: B, c: C) -> "Triple[A, B, C]":
        """Create a triple from three objects."""
        return cls(a, b, c)
