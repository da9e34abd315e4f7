"""Unit tests for the keyed context store."""

from __future__ import annotations

import pytest

from core.errors import StrataStoreError
from core.types import ABSENT
from coupling.pair import Pair
from store.context import Context


def _sample_context() -> Context:
    return (
        Context.builder()
        .put("name", "demo")
        .put("count", 3)
        .put("ratio", 0.5)
        .put("label", "x")
        .put("limit", 10)
        .build()
    )


def test_find_returns_values_in_insertion_order() -> None:
    """Keyed find should follow insertion order, not key order."""
    context = _sample_context()

    assert list(context.find(int)) == [3, 10]


def test_find_entries_reverse_keeps_keys() -> None:
    """Reverse entry traversal should pair keys with values."""
    context = _sample_context()

    keys = [entry.key for entry in context.find_entries(str, reverse=True)]

    assert keys == ["label", "name"]


def test_predicate_receives_key_and_value() -> None:
    """Keyed predicates should be called with key and value."""
    context = _sample_context()

    lookup = context.first(int, lambda key, value: key.startswith("li"))

    assert (lookup.key, lookup.value) == ("limit", 10)


def test_last_returns_last_typed_match() -> None:
    """Last should walk from the most recent entry."""
    lookup = _sample_context().last(str)

    assert (lookup.key, lookup.value, lookup.position) == ("label", "x", 3)


def test_get_by_key_is_type_checked() -> None:
    """Exact-key lookup should check the stored value type."""
    context = _sample_context()

    assert context.get("count", int).value == 3
    assert context.get("count", str) is ABSENT
    assert context.get("missing") is ABSENT


def test_get_by_key_applies_predicate() -> None:
    """Exact-key lookup should honor the keyed predicate."""
    context = _sample_context()

    assert context.get("count", int, lambda key, value: value > 5) is ABSENT


def test_repeated_put_keeps_original_position() -> None:
    """Re-putting a key should replace its value in place."""
    context = Context.builder().put("a", 1).put("b", 2).put("a", 3).build()

    assert context.content() == {"a": 3, "b": 2}
    assert context.keys() == ["a", "b"]


def test_content_is_a_defensive_copy() -> None:
    """Mutating content output should not alter the context."""
    context = _sample_context()

    content = context.content()
    content["extra"] = 1

    assert "extra" not in context


def test_stack_pops_pairs_in_insertion_order() -> None:
    """The stack view should pop the first pair first."""
    stack = Context({"a": 1, "b": 2}).stack()

    assert stack.pop() == Pair("a", 1)


def test_empty_context_reports_absence() -> None:
    """Empty contexts should return the absent marker."""
    context = Context()

    assert context.is_empty()
    assert context.first(object) is ABSENT and context.all(object) == []


def test_non_string_key_is_rejected() -> None:
    """Context keys must be strings."""
    with pytest.raises(StrataStoreError):
        Context.builder().put(1, "value")


def test_builder_is_consumed_by_build() -> None:
    """A built builder should reject further puts."""
    builder = Context.builder()
    builder.build()

    with pytest.raises(StrataStoreError):
        builder.put("a", 1)
