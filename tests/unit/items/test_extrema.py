"""Unit tests for minimum and maximum helpers."""

from __future__ import annotations

import numpy

from items.extrema import maximum, minimum


def test_minimum_and_maximum_of_numbers() -> None:
    """Extremes should follow natural ordering."""
    values = [4, -2, 9, 0]

    assert minimum(values) == -2 and maximum(values) == 9


def test_extrema_use_comparator() -> None:
    """A comparator should drive the extreme selection."""
    by_length = lambda left, right: len(left) - len(right)

    assert maximum(["bb", "a", "ccc"], by_length) == "ccc"


def test_extrema_keep_first_on_ties() -> None:
    """Ties should resolve to the earliest value."""
    by_length = lambda left, right: len(left) - len(right)

    assert minimum(["ab", "cd"], by_length) == "ab"
    assert maximum(["ab", "cd"], by_length) == "ab"


def test_empty_numpy_array_yields_dtype_zero() -> None:
    """Empty arrays should return the zero of their dtype."""
    assert minimum(numpy.array([], dtype=numpy.int32)) == 0
    empty_flag = maximum(numpy.array([], dtype=bool))
    assert isinstance(empty_flag, numpy.bool_) and not empty_flag


def test_empty_list_yields_none() -> None:
    """Empty generic input should return None."""
    assert minimum([]) is None and maximum(()) is None
