"""Sequence comparison and search helpers.

``compare`` folds per-element comparisons by summing them and then adds
the length difference. Opposite element differences can cancel out, so
the result is not a lexicographic ordering; callers that need one
should compare the sequences directly.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from core.constants import NOT_FOUND_INDEX

Comparator = Callable[[Any, Any], int]


def compare(
    a: Sequence[Any] | None,
    b: Sequence[Any] | None,
    comparator: Comparator | None = None,
) -> int:
    """Compare two sequences by summing element comparisons.

    Args:
        a: Left-hand sequence; None sorts before any sequence.
        b: Right-hand sequence; None sorts before any sequence.
        comparator: Optional ``(x, y) -> int`` comparator. Defaults to a
            natural -1/0/1 comparison.

    Returns:
        Sum of comparator results over the common prefix plus
        ``len(a) - len(b)``; zero when ``a is b``.
    """
    if a is b:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    compare_items = comparator or natural_compare
    total = sum(int(compare_items(left, right)) for left, right in zip(a, b))
    return total + len(a) - len(b)


def natural_compare(left: Any, right: Any) -> int:
    """Return -1, 0 or 1 from the natural ordering of two values."""
    return int(left > right) - int(left < right)


def index_of(value: Any, values: Sequence[Any]) -> int:
    """Return the first position equal to ``value``, or -1."""
    for position, item in enumerate(values):
        if bool(item == value):
            return position
    return NOT_FOUND_INDEX


def last_index_of(value: Any, values: Sequence[Any]) -> int:
    """Return the last position equal to ``value``, or -1."""
    for position in range(len(values) - 1, -1, -1):
        if bool(values[position] == value):
            return position
    return NOT_FOUND_INDEX


def contains(value: Any, values: Sequence[Any]) -> bool:
    """Return whether any element equals ``value``."""
    return index_of(value, values) != NOT_FOUND_INDEX
