"""Collection construction and copy helpers."""

from __future__ import annotations

import copy
from typing import Any, Callable, Iterable, Sequence

import numpy

from coupling.pair import KeyValue, Pair


def build_list(*values: Any) -> list[Any]:
    """Return a new mutable list holding ``values``."""
    return list(values)


def build_map(*entries: Any, factory: Callable[[], Any] = dict) -> Any:
    """Build a mapping from pairs.

    Args:
        entries: ``Pair``, ``KeyValue`` or ``(key, value)`` tuples. Later
            entries overwrite earlier ones with the same key.
        factory: Zero-argument mapping constructor.

    Returns:
        The populated mapping.
    """
    result = factory()
    for entry in entries:
        if isinstance(entry, (Pair, KeyValue)):
            key, value = entry.as_tuple()
        else:
            key, value = entry
        result[key] = value
    return result


def loose_clone(values: Iterable[Any], factory: Callable[[Iterable[Any]], Any] = list) -> Any:
    """Copy a collection, sharing its elements."""
    return factory(values)


def deep_clone(values: Iterable[Any], factory: Callable[[Iterable[Any]], Any] = list) -> Any:
    """Copy a collection and shallow-copy each element with ``copy.copy``."""
    return factory(copy.copy(value) for value in values)


def remove_leading_zeroes(values: Sequence[Any]) -> Any:
    """Return a copy of ``values`` without its leading zero elements.

    ``False`` and ``0.0`` count as zero. Arrays stay arrays.
    """
    count = 0
    while count < len(values) and bool(values[count] == 0):
        count += 1
    if isinstance(values, numpy.ndarray):
        return values[count:].copy()
    return values[count:]
