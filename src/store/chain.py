"""Positional typed store.

A chain is an immutable ordered sequence of heterogeneous values.
Values are appended through a consuming builder and later retrieved
by position or by runtime type.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from core.errors import StrataIndexError, StrataStoreError
from core.logging_config import get_logger
from core.type_tags import TypeQuery, make_entry
from core.types import ABSENT, Entry, Lookup
from store.typed_store import TypedStore

_LOGGER = get_logger(__name__)


class Chain(TypedStore):
    """Immutable positional store with typed lookup.

    Predicates receive the matched value only.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        """Create a chain holding ``values`` in order.

        Args:
            values: Values to store; the chain does not copy them.
        """
        super().__init__(make_entry(value, position) for position, value in enumerate(values))

    @staticmethod
    def builder() -> "ChainBuilder":
        """Return a fresh chain builder."""
        return ChainBuilder()

    @classmethod
    def of(cls, *values: Any) -> "Chain":
        """Create a chain from positional arguments."""
        return cls(values)

    def get(
        self,
        index: int,
        type_: type = object,
        predicate: Callable[[Any], bool] | None = None,
    ) -> Lookup[Any]:
        """Return the value at ``index`` when it matches the query.

        Args:
            index: Zero-based position.
            type_: Class the value must be an instance of.
            predicate: Optional extra condition on the value.

        Returns:
            Lookup of the value, or ``ABSENT`` when it does not match.

        Raises:
            StrataIndexError: If ``index`` is outside the chain.
            StrataTypeQueryError: If ``type_`` is not a class.
        """
        query = TypeQuery.of(type_)
        if index < 0 or index >= len(self._entries):
            raise StrataIndexError(
                f"Chain index {index} out of range for chain of length {len(self._entries)}."
            )
        entry = self._entries[index]
        if not query.accepts(entry):
            return ABSENT
        if predicate is not None and not self._test(predicate, entry):
            return ABSENT
        return Lookup.from_entry(entry)

    def content(self) -> list[Any]:
        """Return a copy of the stored values in insertion order."""
        return [entry.value for entry in self._entries]

    def stack(self) -> list[Any]:
        """Return values arranged so ``pop()`` yields them in insertion order."""
        return [entry.value for entry in self._reversed_entries]

    def __iter__(self) -> Iterator[Any]:
        return (entry.value for entry in self._entries)

    def __repr__(self) -> str:
        return f"Chain({self.content()!r})"

    def _test(self, predicate: Callable[..., bool], entry: Entry) -> bool:
        return bool(predicate(entry.value))


class ChainBuilder:
    """Append-only builder consumed by ``build()``."""

    def __init__(self) -> None:
        self._values: list[Any] | None = []

    def add(self, value: Any) -> "ChainBuilder":
        """Append one value.

        Raises:
            StrataStoreError: If the builder was already consumed.
        """
        self._open_values().append(value)
        return self

    def extend(self, values: Iterable[Any]) -> "ChainBuilder":
        """Append every value from an iterable.

        Raises:
            StrataStoreError: If the builder was already consumed.
        """
        self._open_values().extend(values)
        return self

    def build(self) -> Chain:
        """Freeze appended values into a chain and consume the builder.

        Raises:
            StrataStoreError: If the builder was already consumed.
        """
        values = self._open_values()
        self._values = None
        chain = Chain(values)
        _LOGGER.debug("chain_built", entry_count=len(chain))
        return chain

    def _open_values(self) -> list[Any]:
        if self._values is None:
            raise StrataStoreError(
                "Chain builder was already consumed by build(); create a new builder."
            )
        return self._values
