"""Public SDK surface for Strata.

This module provides a stable import path for library users.
It re-exports the typed stores, layer sets, coupling types, and
sequence helpers.
"""

from __future__ import annotations

from core.config import StrataConfig
from core.errors import (
    StrataConfigError,
    StrataError,
    StrataIndexError,
    StrataStoreError,
    StrataTypeQueryError,
)
from core.type_tags import canonical_type
from core.types import ABSENT, Entry, Lookup
from coupling.pair import KeyValue, Pair
from coupling.switch import Switch
from coupling.triple import Triple
from items.building import build_list, build_map, deep_clone, loose_clone, remove_leading_zeroes
from items.comparison import compare, contains, index_of, last_index_of
from items.extrema import maximum, minimum
from items.identity_list import IdentityList
from items.nested import transform, traverse
from items.ordering import random_element, randomized, reverse, reversed_copy, shuffle, swap
from items.ranges import char_range, value_range
from layers.layer_set import LayerSet
from store.chain import Chain, ChainBuilder
from store.context import Context, ContextBuilder
from store.typed_store import Matches, TypedStore

__all__ = [
    "ABSENT",
    "Chain",
    "ChainBuilder",
    "Context",
    "ContextBuilder",
    "Entry",
    "IdentityList",
    "KeyValue",
    "LayerSet",
    "Lookup",
    "Matches",
    "Pair",
    "StrataConfig",
    "StrataConfigError",
    "StrataError",
    "StrataIndexError",
    "StrataStoreError",
    "StrataTypeQueryError",
    "Switch",
    "Triple",
    "TypedStore",
    "build_list",
    "build_map",
    "canonical_type",
    "char_range",
    "compare",
    "contains",
    "deep_clone",
    "index_of",
    "last_index_of",
    "loose_clone",
    "maximum",
    "minimum",
    "random_element",
    "randomized",
    "remove_leading_zeroes",
    "reverse",
    "reversed_copy",
    "shuffle",
    "swap",
    "transform",
    "traverse",
    "value_range",
]
