"""Canonical type tags for runtime type queries.

Numpy scalar types model the Python numeric builtins the way primitive
and boxed types model each other elsewhere. Stores tag every value with
its canonical type at insertion so queries can treat ``numpy.int32(3)``
and ``3`` as the same kind of value.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from typing import Any

import numpy

from core.errors import StrataTypeQueryError
from core.types import Entry

# Order matters: numpy.bool_ is checked before the numeric families.
_NUMPY_CANONICAL_TYPES: tuple[tuple[type, type], ...] = (
    (numpy.bool_, bool),
    (numpy.integer, int),
    (numpy.floating, float),
    (numpy.complexfloating, complex),
    (numpy.str_, str),
    (numpy.bytes_, bytes),
)


def canonical_type(query: type) -> type:
    """Collapse numpy scalar types onto their Python builtin counterpart.

    Args:
        query: Any class.

    Returns:
        The builtin the class models, or the class itself.
    """
    for numpy_type, builtin_type in _NUMPY_CANONICAL_TYPES:
        if issubclass(query, numpy_type):
            return builtin_type
    return query


def type_tag_of(value: Any) -> type:
    """Return the canonical type tag for a stored value."""
    return canonical_type(type(value))


def make_entry(value: Any, position: int, key: str | None = None) -> Entry:
    """Create a store entry, computing its type tag once."""
    return Entry(value=value, type_tag=type_tag_of(value), position=position, key=key)


@dataclass(frozen=True)
class TypeQuery:
    """A validated runtime type query.

    Attributes:
        requested: Class supplied by the caller.
        canonical: Canonical form used against entry type tags.
    """

    requested: type
    canonical: type

    @classmethod
    def of(cls, query: object) -> "TypeQuery":
        """Validate and canonicalize a caller-supplied type.

        Raises:
            StrataTypeQueryError: If ``query`` is not a class. Parameterized
                generics such as ``list[int]`` are not classes.
        """
        if isinstance(query, types.GenericAlias) or not isinstance(query, type):
            raise StrataTypeQueryError(
                f"Type query must be a class, got {query!r} ({type(query).__name__})."
            )
        return cls(requested=query, canonical=canonical_type(query))

    def accepts(self, entry: Entry) -> bool:
        """Return whether an entry's value satisfies this query."""
        if issubclass(entry.type_tag, self.canonical):
            return True
        return isinstance(entry.value, self.requested)
