"""Typed lookup over heterogeneous ordered entries.

This module holds the traversal and matching logic shared by the
positional chain store and the string-keyed context store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from core.type_tags import TypeQuery
from core.types import ABSENT, Entry, Lookup

T = TypeVar("T")


class Matches(Generic[T]):
    """Lazy, restartable view over query results.

    Every iteration re-runs the query against the store, so a
    ``Matches`` can be iterated any number of times.
    """

    def __init__(self, source: Callable[[], Iterator[T]]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return self._source()

    def is_empty(self) -> bool:
        """Return whether the query produces no results."""
        for _ in self._source():
            return False
        return True

    def to_list(self) -> list[T]:
        """Materialize the results into a new list."""
        return list(self._source())


class TypedStore(ABC):
    """Immutable ordered entries queried by runtime type.

    Subclasses decide how a predicate is applied to an entry: positional
    stores pass the value, keyed stores pass the key and the value.
    """

    def __init__(self, entries: Iterable[Entry]) -> None:
        """Freeze entries and derive the reversed view.

        Args:
            entries: Entries in insertion order.
        """
        self._entries: tuple[Entry, ...] = tuple(entries)
        self._reversed_entries: tuple[Entry, ...] = self._entries[::-1]

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        """Return whether the store holds no entries."""
        return not self._entries

    def find(
        self,
        type_: type = object,
        predicate: Callable[..., bool] | None = None,
        *,
        reverse: bool = False,
    ) -> Matches[Any]:
        """Return matching values lazily.

        Args:
            type_: Class the values must be instances of, after canonical
                numpy scalar normalization.
            predicate: Optional extra condition on each typed match.
            reverse: Walk from the last inserted entry to the first.

        Returns:
            Restartable iterable of matching values in traversal order.

        Raises:
            StrataTypeQueryError: If ``type_`` is not a class.
        """
        query = TypeQuery.of(type_)
        return Matches(lambda: (entry.value for entry in self._scan(query, predicate, reverse)))

    def find_entries(
        self,
        type_: type = object,
        predicate: Callable[..., bool] | None = None,
        *,
        reverse: bool = False,
    ) -> Matches[Entry]:
        """Return matching entries lazily, keeping keys and positions.

        Raises:
            StrataTypeQueryError: If ``type_`` is not a class.
        """
        query = TypeQuery.of(type_)
        return Matches(lambda: self._scan(query, predicate, reverse))

    def first(self, type_: type = object, predicate: Callable[..., bool] | None = None) -> Lookup[Any]:
        """Return the first match in insertion order, or ``ABSENT``."""
        return self._first_of(TypeQuery.of(type_), predicate, reverse=False)

    def last(self, type_: type = object, predicate: Callable[..., bool] | None = None) -> Lookup[Any]:
        """Return the last match in insertion order, or ``ABSENT``."""
        return self._first_of(TypeQuery.of(type_), predicate, reverse=True)

    def all(self, type_: type = object, predicate: Callable[..., bool] | None = None) -> list[Any]:
        """Return every matching value in insertion order."""
        return self.find(type_, predicate).to_list()

    def all_entries(
        self,
        type_: type = object,
        predicate: Callable[..., bool] | None = None,
    ) -> list[Entry]:
        """Return every matching entry in insertion order."""
        return self.find_entries(type_, predicate).to_list()

    def _first_of(
        self,
        query: TypeQuery,
        predicate: Callable[..., bool] | None,
        reverse: bool,
    ) -> Lookup[Any]:
        for entry in self._scan(query, predicate, reverse):
            return Lookup.from_entry(entry)
        return ABSENT

    def _scan(
        self,
        query: TypeQuery,
        predicate: Callable[..., bool] | None,
        reverse: bool,
    ) -> Iterator[Entry]:
        entries = self._reversed_entries if reverse else self._entries
        for entry in entries:
            if not query.accepts(entry):
                continue
            if predicate is not None and not self._test(predicate, entry):
                continue
            yield entry

    @abstractmethod
    def _test(self, predicate: Callable[..., bool], entry: Entry) -> bool:
        """Apply a caller predicate to one typed entry."""
