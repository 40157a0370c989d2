"""
Sort Ordering

Comparators shared by the storage root tables. Floats only form a partial
order, so any pair that cannot be ordered (NaN involved) compares equal and
keeps its relative position under Python's stable sort.
"""

from functools import cmp_to_key
from typing import Any, Callable


def partial_cmp(a: Any, b: Any) -> int:
    """Three-way compare that reports unordered pairs as equal."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def ascending_key(attr: str) -> Callable[[Any], Any]:
    """Sort key ordering objects by ``attr``, smallest first."""
    return cmp_to_key(lambda a, b: partial_cmp(getattr(a, attr), getattr(b, attr)))


def descending_key(attr: str) -> Callable[[Any], Any]:
    """Sort key ordering objects by ``attr``, largest first."""
    return cmp_to_key(lambda a, b: partial_cmp(getattr(b, attr), getattr(a, attr)))
