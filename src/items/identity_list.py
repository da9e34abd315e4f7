"""List variant comparing elements by identity."""

from __future__ import annotations

import sys
from typing import Any


class IdentityList(list):
    """A ``list`` whose searches use ``is`` instead of ``==``.

    Only ``index``, ``last_index``, ``count``, ``remove`` and ``in`` change;
    every other list operation behaves as usual.
    """

    def index(self, value: Any, start: int = 0, stop: int = sys.maxsize) -> int:
        for position in range(*slice(start, stop).indices(len(self))):
            if self[position] is value:
                return position
        raise ValueError(f"{value!r} is not in list")

    def last_index(self, value: Any) -> int:
        """Return the highest position holding exactly ``value``.

        Raises:
            ValueError: If no element is ``value``.
        """
        for position in range(len(self) - 1, -1, -1):
            if self[position] is value:
                return position
        raise ValueError(f"{value!r} is not in list")

    def count(self, value: Any) -> int:
        return sum(1 for item in self if item is value)

    def remove(self, value: Any) -> None:
        del self[self.index(value)]

    def __contains__(self, value: object) -> bool:
        return any(item is value for item in self)
