"""Minimum and maximum helpers with safe empty defaults."""

from __future__ import annotations

import functools
from typing import Any, Callable, Iterable

import numpy

Comparator = Callable[[Any, Any], int]


def minimum(values: Iterable[Any], comparator: Comparator | None = None) -> Any:
    """Return the first smallest value.

    Args:
        values: Values to scan.
        comparator: Optional ``(x, y) -> int`` comparator.

    Returns:
        The smallest value; for empty input see ``empty_default``.
    """
    if _is_empty_array(values):
        return empty_default(values)
    key = functools.cmp_to_key(comparator) if comparator is not None else None
    return min(values, key=key, default=None)


def maximum(values: Iterable[Any], comparator: Comparator | None = None) -> Any:
    """Return the first largest value.

    Args:
        values: Values to scan.
        comparator: Optional ``(x, y) -> int`` comparator.

    Returns:
        The largest value; for empty input see ``empty_default``.
    """
    if _is_empty_array(values):
        return empty_default(values)
    key = functools.cmp_to_key(comparator) if comparator is not None else None
    return max(values, key=key, default=None)


def empty_default(values: Any) -> Any:
    """Return the safe result for an empty input.

    Numpy arrays yield the zero of their dtype (``0``, ``0.0``, ``False``,
    ``""``); any other input yields None.
    """
    if isinstance(values, numpy.ndarray):
        return numpy.zeros(1, dtype=values.dtype)[0]
    return None


def _is_empty_array(values: Any) -> bool:
    return isinstance(values, numpy.ndarray) and values.size == 0
