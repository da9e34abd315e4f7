"""Depth-first walks over nested lists.

Nested lists are visited once each, so self-referencing structures
terminate. Only ``list`` instances are descended into; every other
value is a leaf.
"""

from __future__ import annotations

from typing import Any, Callable

from items.identity_list import IdentityList


def traverse(values: list[Any], action: Callable[[Any], None]) -> None:
    """Call ``action`` on every leaf, depth first."""
    _traverse(values, action, IdentityList())


def transform(values: list[Any], action: Callable[[Any], Any]) -> None:
    """Replace every leaf with ``action(leaf)`` in place, depth first."""
    _transform(values, action, IdentityList())


def _traverse(values: list[Any], action: Callable[[Any], None], seen: IdentityList) -> None:
    if values in seen:
        return
    seen.append(values)
    for item in values:
        if isinstance(item, list):
            _traverse(item, action, seen)
        else:
            action(item)


def _transform(values: list[Any], action: Callable[[Any], Any], seen: IdentityList) -> None:
    if values in seen:
        return
    seen.append(values)
    for position, item in enumerate(values):
        if isinstance(item, list):
            _transform(item, action, seen)
        else:
            values[position] = action(item)
