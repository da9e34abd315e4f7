"""Ordered layers expanded into cartesian stacks.

A layer set keeps a dense list of layers. Expanding it yields every
stack that picks one value from each layer, ordered by layer index,
with the last layer varying fastest.
"""

from __future__ import annotations

import itertools
import math
from typing import Generic, Iterable, TypeVar

from core.errors import StrataIndexError
from core.logging_config import get_logger

T = TypeVar("T")

_LOGGER = get_logger(__name__)


class LayerSet(Generic[T]):
    """Mutable, densely indexed layers of values."""

    def __init__(self) -> None:
        self._layers: list[list[T]] = []

    def __len__(self) -> int:
        return len(self._layers)

    def append(self, value: T, layer_index: int) -> None:
        """Append ``value`` to a layer, creating missing layers up to it.

        Args:
            value: Value to append.
            layer_index: Non-negative layer index, without upper bound.

        Raises:
            StrataIndexError: If ``layer_index`` is negative.
        """
        self.ensure_layer(layer_index)
        self._layers[layer_index].append(value)

    def extend(self, values: Iterable[T], layer_index: int) -> None:
        """Append every value of an iterable to one layer.

        Raises:
            StrataIndexError: If ``layer_index`` is negative.
        """
        self.ensure_layer(layer_index)
        self._layers[layer_index].extend(values)

    def ensure_layer(self, layer_index: int) -> None:
        """Create empty layers so that ``layer_index`` exists.

        Raises:
            StrataIndexError: If ``layer_index`` is negative.
        """
        if layer_index < 0:
            raise StrataIndexError(f"Layer index must be non-negative, got {layer_index}.")
        missing = layer_index + 1 - len(self._layers)
        if missing <= 0:
            return
        self._layers.extend([] for _ in range(missing))
        _LOGGER.debug("layers_created", created=missing, layer_count=len(self._layers))

    def layer(self, index: int) -> tuple[T, ...]:
        """Return a snapshot of one layer without creating it.

        Args:
            index: Layer index.

        Returns:
            Layer values in append order; empty when the layer does not exist.

        Raises:
            StrataIndexError: If ``index`` is negative.
        """
        if index < 0:
            raise StrataIndexError(f"Layer index must be non-negative, got {index}.")
        if index >= len(self._layers):
            return ()
        return tuple(self._layers[index])

    def get(self, layer_index: int, element_index: int) -> T:
        """Return one element of one layer.

        Raises:
            StrataIndexError: If either index is out of range.
        """
        values = self.layer(layer_index)
        if element_index < 0 or element_index >= len(values):
            raise StrataIndexError(
                f"Element index {element_index} out of range for layer {layer_index} "
                f"holding {len(values)} values."
            )
        return values[element_index]

    def stack_count(self) -> int:
        """Return how many stacks ``expand()`` would produce."""
        if not self._layers:
            return 0
        return math.prod(len(layer) for layer in self._layers)

    def expand(self) -> list[list[T]]:
        """Build every stack holding one value per layer.

        Stacks are ordered with layer 0 varying slowest. An empty layer,
        including an empty layer 0, leaves nothing to combine and yields
        no stacks. A set without layers yields no stacks either.

        Returns:
            Fresh lists, one per combination, layer 0 value first.
        """
        if not self._layers:
            return []
        stacks = [list(combination) for combination in itertools.product(*self._layers)]
        _LOGGER.debug("layer_set_expanded", layer_count=len(self._layers), stack_count=len(stacks))
        return stacks

    def __repr__(self) -> str:
        return f"LayerSet({self._layers!r})"
