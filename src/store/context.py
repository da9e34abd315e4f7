"""String-keyed typed store.

A context maps string keys to heterogeneous values in insertion order.
It supports exact-key lookup as well as the typed traversal queries
shared with the positional chain.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from core.errors import StrataStoreError
from core.logging_config import get_logger
from core.type_tags import TypeQuery, make_entry
from core.types import ABSENT, Entry, Lookup
from coupling.pair import Pair
from store.typed_store import TypedStore

_LOGGER = get_logger(__name__)


class Context(TypedStore):
    """Immutable insertion-ordered keyed store with typed lookup.

    Predicates receive ``(key, value)`` for every typed match.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        """Create a context from an insertion-ordered mapping.

        Args:
            values: Key/value pairs to store; keys must be strings.

        Raises:
            StrataStoreError: If a key is not a string.
        """
        mapping = dict(values or {})
        for key in mapping:
            _require_string_key(key)
        entries = [
            make_entry(value, position, key=key)
            for position, (key, value) in enumerate(mapping.items())
        ]
        super().__init__(entries)
        self._by_key: dict[str, Entry] = {entry.key: entry for entry in entries}  # type: ignore[misc]

    @staticmethod
    def builder() -> "ContextBuilder":
        """Return a fresh context builder."""
        return ContextBuilder()

    def get(
        self,
        key: str,
        type_: type = object,
        predicate: Callable[[str, Any], bool] | None = None,
    ) -> Lookup[Any]:
        """Return the value stored under ``key`` when it matches the query.

        Args:
            key: Exact key to read.
            type_: Class the value must be an instance of.
            predicate: Optional extra condition on ``(key, value)``.

        Returns:
            Lookup of the value, or ``ABSENT`` for a missing key or mismatch.

        Raises:
            StrataTypeQueryError: If ``type_`` is not a class.
        """
        query = TypeQuery.of(type_)
        entry = self._by_key.get(key)
        if entry is None or not query.accepts(entry):
            return ABSENT
        if predicate is not None and not self._test(predicate, entry):
            return ABSENT
        return Lookup.from_entry(entry)

    def keys(self) -> list[str]:
        """Return keys in insertion order."""
        return list(self._by_key)

    def content(self) -> dict[str, Any]:
        """Return a copy of the stored mapping in insertion order."""
        return {entry.key: entry.value for entry in self._entries}  # type: ignore[misc]

    def stack(self) -> list[Pair[str, Any]]:
        """Return pairs arranged so ``pop()`` yields them in insertion order."""
        return [Pair(entry.key, entry.value) for entry in self._reversed_entries]  # type: ignore[arg-type]

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __repr__(self) -> str:
        return f"Context({self.content()!r})"

    def _test(self, predicate: Callable[..., bool], entry: Entry) -> bool:
        return bool(predicate(entry.key, entry.value))


class ContextBuilder:
    """Insertion-ordered builder consumed by ``build()``.

    Putting an existing key replaces its value and keeps its position.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] | None = {}

    def put(self, key: str, value: Any) -> "ContextBuilder":
        """Store ``value`` under ``key``.

        Raises:
            StrataStoreError: If the key is not a string or the builder
                was already consumed.
        """
        values = self._open_values()
        _require_string_key(key)
        values[key] = value
        return self

    def update(self, values: Mapping[str, Any]) -> "ContextBuilder":
        """Store every pair of a mapping in its iteration order."""
        for key, value in values.items():
            self.put(key, value)
        return self

    def build(self) -> Context:
        """Freeze stored pairs into a context and consume the builder.

        Raises:
            StrataStoreError: If the builder was already consumed.
        """
        values = self._open_values()
        self._values = None
        context = Context(values)
        _LOGGER.debug("context_built", entry_count=len(context))
        return context

    def _open_values(self) -> dict[str, Any]:
        if self._values is None:
            raise StrataStoreError(
                "Context builder was already consumed by build(); create a new builder."
            )
        return self._values


def _require_string_key(key: object) -> None:
    if not isinstance(key, str):
        raise StrataStoreError(
            f"Context keys must be strings, got {key!r} ({type(key).__name__})."
        )
