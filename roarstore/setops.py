"""Set operations over sorted, duplicate-free sequences of integers."""

from heapq import merge
from itertools import groupby

_LEFT = 0
_RIGHT = 1


def _grouped(lhs, rhs):
    """Yield ``(value, sides)`` for every value in either input, in order."""
    tagged = merge(
        ((value, _LEFT) for value in lhs),
        ((value, _RIGHT) for value in rhs),
    )
    for value, group in groupby(tagged, key=lambda item: item[0]):
        yield value, {side for _, side in group}


def union(lhs, rhs):
    """Values present in either input, sorted."""
    return [value for value, _ in _grouped(lhs, rhs)]


def intersection(lhs, rhs):
    """Values present in both inputs, sorted."""
    return [value for value, sides in _grouped(lhs, rhs) if len(sides) == 2]


def difference(lhs, rhs):
    """Values of ``lhs`` absent from ``rhs``, sorted."""
    return [value for value, sides in _grouped(lhs, rhs) if sides == {_LEFT}]


def symmetric_difference(lhs, rhs):
    """Values present in exactly one of the inputs, sorted."""
    return [value for value, sides in _grouped(lhs, rhs) if len(sides) == 1]