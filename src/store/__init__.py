"""Typed heterogeneous stores.

This package holds immutable ordered stores queried by runtime type.
Chains are positional; contexts are keyed by string.
"""
