"""Small coupling value types.

This package holds pairs, triples, and either-or switches shared by
stores and collection helpers.
"""
