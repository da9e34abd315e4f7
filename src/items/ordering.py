"""Ordering helpers: swap, reverse, shuffle, and random picks.

``swap``, ``reverse`` and ``shuffle`` modify their input in place and
return it. ``reversed_copy`` and ``randomized`` leave the input intact.
Random helpers draw from a ``random.Random`` seeded from STRATA_RANDOM_SEED
when no generator is supplied.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence
from typing import Any

import numpy

from core.config import StrataConfig
from core.errors import StrataIndexError
from items.extrema import empty_default


def swap(values: MutableSequence[Any], a: int, b: int) -> MutableSequence[Any]:
    """Exchange two positions in place.

    Raises:
        StrataIndexError: If either index is outside ``values``.
    """
    size = len(values)
    for index in (a, b):
        if index < 0 or index >= size:
            raise StrataIndexError(
                f"Swap index {index} out of range for sequence of length {size}."
            )
    values[a], values[b] = values[b], values[a]
    return values


def reverse(values: MutableSequence[Any]) -> MutableSequence[Any]:
    """Reverse a sequence in place and return it."""
    left, right = 0, len(values) - 1
    while left < right:
        swap(values, left, right)
        left += 1
        right -= 1
    return values


def reversed_copy(values: Sequence[Any]) -> Any:
    """Return a reversed copy, keeping arrays as arrays and lists as lists."""
    if isinstance(values, numpy.ndarray):
        return values[::-1].copy()
    if isinstance(values, (list, tuple, str)):
        return values[::-1]
    return list(reversed(list(values)))


def shuffle(values: MutableSequence[Any], rng: random.Random | None = None) -> MutableSequence[Any]:
    """Shuffle in place with a Fisher-Yates pass and return the input.

    Args:
        values: Mutable sequence to shuffle.
        rng: Optional random source; a configured default is used otherwise.
    """
    randomizer = rng or _default_random()
    for bound in range(len(values), 1, -1):
        swap(values, bound - 1, randomizer.randrange(bound))
    return values


def randomized(values: Sequence[Any], rng: random.Random | None = None) -> Any:
    """Return a shuffled copy of ``values``."""
    copied = values.copy() if isinstance(values, numpy.ndarray) else list(values)
    return shuffle(copied, rng)


def random_element(values: Any, rng: random.Random | None = None) -> Any:
    """Pick one element uniformly at random.

    Returns:
        A random element; for empty input the ``empty_default`` value.
    """
    if not isinstance(values, (Sequence, numpy.ndarray)):
        values = list(values)
    if len(values) == 0:
        return empty_default(values)
    randomizer = rng or _default_random()
    return values[randomizer.randrange(len(values))]


def _default_random() -> random.Random:
    return StrataConfig.from_env().build_random()
