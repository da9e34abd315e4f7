"""Unit tests for stepped range generation."""

from __future__ import annotations

import numpy

from items.ranges import char_range, value_range


def test_value_range_stops_before_passing_bound() -> None:
    """Ascending ranges should end at the last value not above the bound."""
    assert value_range(2, 10, 3).tolist() == [2, 5, 8]


def test_value_range_descends_when_start_exceeds_bound() -> None:
    """Descending ranges should step down toward the bound."""
    assert value_range(10, 2, 3).tolist() == [10, 7, 4]


def test_value_range_equal_bounds_yields_single_value() -> None:
    """Equal bounds should produce exactly one value."""
    assert value_range(5, 5, 1).tolist() == [5]


def test_value_range_zero_step_yields_both_bounds() -> None:
    """A zero step should degenerate to the two bounds."""
    assert value_range(1, 9, 0).tolist() == [1, 9]


def test_value_range_ignores_step_sign() -> None:
    """Direction should come from the bounds, not the step sign."""
    assert value_range(0, 4, -2).tolist() == [0, 2, 4]


def test_value_range_honors_dtype() -> None:
    """An explicit dtype should be applied to the result."""
    result = value_range(0, 3, dtype=numpy.int8)

    assert result.dtype == numpy.int8 and result.tolist() == [0, 1, 2, 3]


def test_value_range_supports_floats() -> None:
    """Float bounds should produce a float array."""
    result = value_range(0.0, 2.0, 0.5)

    assert result.dtype == numpy.float64 and result.tolist() == [0.0, 0.5, 1.0, 1.5, 2.0]


def test_char_range_walks_code_points() -> None:
    """Character ranges should step through code points."""
    assert char_range("a", "e", 2) == ["a", "c", "e"]
    assert char_range("c", "a") == ["c", "b", "a"]
