"""Inclusive stepped range generation.

Ranges start at ``a`` and move toward ``b`` by the magnitude of the
step, stopping at the last value that does not pass ``b``. Direction
comes from comparing ``a`` and ``b``, never from the sign of the step.
"""

from __future__ import annotations

from typing import Any

import numpy

from core.constants import DEFAULT_RANGE_STEP


def value_range(
    a: Any,
    b: Any,
    step: Any = DEFAULT_RANGE_STEP,
    dtype: Any = None,
) -> numpy.ndarray:
    """Generate an inclusive range from ``a`` toward ``b``.

    Args:
        a: First value of the range.
        b: Bound the range approaches without passing.
        step: Distance between neighbours; its sign is ignored.
        dtype: Optional numpy dtype; inferred from the inputs when omitted.

    Returns:
        One-dimensional array. A zero step yields ``[a, b]`` and equal
        bounds yield ``[a]``.
    """
    result_dtype = numpy.dtype(dtype) if dtype is not None else numpy.result_type(a, b, step)
    if step == 0:
        return numpy.array([a, b], dtype=result_dtype)
    magnitude = abs(step)
    direction = 1 if a <= b else -1
    count = int(abs(b - a) // magnitude) + 1
    offsets = numpy.arange(count) * (direction * magnitude)
    return (offsets + a).astype(result_dtype)


def char_range(a: str, b: str, step: int = DEFAULT_RANGE_STEP) -> list[str]:
    """Generate an inclusive range of single characters by code point.

    Args:
        a: First character.
        b: Bound character.
        step: Code point distance between neighbours; its sign is ignored.

    Returns:
        Characters from ``a`` toward ``b``.
    """
    code_points = value_range(ord(a), ord(b), step, dtype=numpy.int64)
    return [chr(int(code_point)) for code_point in code_points]
