"""Either-or coupling type.

A switch holds exactly one of two objects. Reading the missing side
returns the ``ABSENT`` lookup instead of a null value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from core.types import ABSENT, Lookup

A = TypeVar("A")
B = TypeVar("B")

_SIDE_A = "a"
_SIDE_B = "b"


@dataclass(frozen=True)
class Switch(Generic[A, B]):
    """Holder for exactly one of two objects.

    Attributes:
        side: Which side is present, ``"a"`` or ``"b"``.
        value: The present object; None is a valid present object.
    """

    side: str
    value: Any

    def __post_init__(self) -> None:
        if self.side not in (_SIDE_A, _SIDE_B):
            raise ValueError(f"Switch side must be '{_SIDE_A}' or '{_SIDE_B}', got {self.side!r}.")

    @classmethod
    def of_a(cls, a: A) -> "Switch[A, B]":
        """Create a switch with object A present."""
        return cls(_SIDE_A, a)

    @classmethod
    def of_b(cls, b: B) -> "Switch[A, B]":
        """Create a switch with object B present."""
        return cls(_SIDE_B, b)

    def contains_a(self) -> bool:
        """Return whether object A is present."""
        return self.side == _SIDE_A

    def contains_b(self) -> bool:
        """Return whether object B is present."""
        return self.side == _SIDE_B

    def get_a(self) -> Lookup[A]:
        """Return object A, or ``ABSENT`` when B is present."""
        return Lookup.of(self.value) if self.contains_a() else ABSENT

    def get_b(self) -> Lookup[B]:
        """Return object B, or ``ABSENT`` when A is present."""
        return Lookup.of(self.value) if self.contains_b() else ABSENT
