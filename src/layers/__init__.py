"""Layered cartesian product generation.

This package expands independently filled, ordered layers into every
one-value-per-layer combination.
"""
