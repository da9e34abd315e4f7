"""Sequence utilities.

This package provides comparison, search, range, extremum, ordering,
building, and nested traversal helpers for lists, tuples, and numpy
arrays. Helpers leave their input untouched unless documented as
in-place.
"""
