"""Sparse container: a sorted list of distinct 16-bit values."""

from bisect import bisect_left, bisect_right
from enum import Enum

from .bitmap_store import (
    BITMAP_LENGTH,
    BitmapStore,
    _check_index,
    _check_range,
    _check_rank,
    _contains,
    _push,
    _push_unchecked,
)
from .setops import difference, intersection, symmetric_difference, union


class ArrayErrorKind(Enum):
    """Why a sequence was rejected as the contents of an array container."""

    DUPLICATE = "duplicate"
    OUT_OF_ORDER = "out_of_order"


class ArrayStoreError(ValueError):
    """Raised when values for an array container are not strictly increasing."""

    def __init__(self, index, kind):
        super().__init__(index, kind)
        self.index = index
        self.kind = kind

    def __str__(self):
        if self.kind is ArrayErrorKind.DUPLICATE:
            return f"Duplicate element found at index: {self.index}"
        return f"An element was out of order at index: {self.index}"


class ArrayStore:
    """A set of 16-bit values kept as a sorted list."""

    __slots__ = ("_vec",)
    __hash__ = None

    def __init__(self, values=()):
        vec = [_check_index(value) for value in values]
        for position, (prev, cur) in enumerate(zip(vec, vec[1:]), start=1):
            if cur < prev:
                raise ArrayStoreError(position, ArrayErrorKind.OUT_OF_ORDER)
            if cur == prev:
                raise ArrayStoreError(position, ArrayErrorKind.DUPLICATE)
        self._vec = vec

    @classmethod
    def from_sorted(cls, values):
        """Build a store from values the caller guarantees are sorted and distinct."""
        store = cls.__new__(cls)
        store._vec = list(values)
        return store

    def _locate(self, index):
        pos = bisect_left(self._vec, index)
        return pos, pos < len(self._vec) and self._vec[pos] == index

    def _span(self, start, end):
        return bisect_left(self._vec, start), bisect_right(self._vec, end)

    def _has(self, index):
        return self._locate(index)[1]

    def _append(self, index):
        self._vec.append(index)

    def _binary(self, other, merge):
        if not isinstance(other, ArrayStore):
            return NotImplemented
        return ArrayStore.from_sorted(merge(self._vec, other._vec))

    def _in_place(self, other, merge, keep_if_in_bitmap=None):
        if isinstance(other, ArrayStore):
            self._vec = merge(self._vec, other._vec)
        elif isinstance(other, BitmapStore) and keep_if_in_bitmap is not None:
            self._vec = [value for value in self._vec if (value in other) == keep_if_in_bitmap]
        else:
            return NotImplemented
        return self

    def insert(self, index):
        """Add ``index`` at its sorted place; return whether it was absent."""
        index = _check_index(index)
        pos, found = self._locate(index)
        if not found:
            self._vec.insert(pos, index)
        return not found

    def insert_range(self, start, end):
        """Splice ``start..=end`` into the list; return how many values were new."""
        bounds = _check_range(start, end)
        if bounds is None:
            return 0
        start, end = bounds
        lo, hi = self._span(start, end)
        self._vec[lo:hi] = range(start, end + 1)
        return end - start + 1 - (hi - lo)

    def push(self, index):
        """Add ``index`` only if it is larger than every value; return whether it was added."""
        return _push(self, index)

    def push_unchecked(self, index):
        """Add ``index``, which must be larger than every value already present."""
        _push_unchecked(self, index)

    def remove(self, index):
        """Delete ``index`` from the list; return whether it was there."""
        index = _check_index(index)
        pos, found = self._locate(index)
        if found:
            del self._vec[pos]
        return found

    def remove_range(self, start, end):
        """Delete the values in ``start..=end``; return how many there were."""
        bounds = _check_range(start, end)
        if bounds is None:
            return 0
        lo, hi = self._span(*bounds)
        del self._vec[lo:hi]
        return hi - lo

    def __contains__(self, index):
        return _contains(self, index)

    def is_disjoint(self, other):
        return not intersection(self._vec, other._vec)

    def is_subset(self, other):
        return not difference(self._vec, other._vec)

    def to_bitmap_store(self):
        """Return the same values as a bitmap container."""
        words = [0] * BITMAP_LENGTH
        for value in self._vec:
            key, bit = divmod(value, 64)
            words[key] |= 1 << bit
        return BitmapStore.from_words(len(self._vec), words)

    def __len__(self):
        return len(self._vec)

    def min(self):
        """First list entry, or ``None`` for an empty list."""
        return self._vec[0] if self._vec else None

    def max(self):
        """Last list entry, or ``None`` for an empty list."""
        return self._vec[-1] if self._vec else None

    def rank(self, index):
        """How many list entries are at most ``index``."""
        return bisect_right(self._vec, _check_index(index))

    def select(self, n):
        """List entry at position ``n``, or ``None`` past the end."""
        n = _check_rank(n)
        return self._vec[n] if n < len(self._vec) else None

    def __iter__(self):
        return iter(tuple(self._vec))

    def as_list(self):
        """The values, sorted, as a new list."""
        return list(self._vec)

    def copy(self):
        return ArrayStore.from_sorted(self._vec)

    def __eq__(self, other):
        if not isinstance(other, ArrayStore):
            return NotImplemented
        return self._vec == other._vec

    def __repr__(self):
        return f"ArrayStore({self._vec!r})"

    def __or__(self, other):
        return self._binary(other, union)

    def __and__(self, other):
        return self._binary(other, intersection)

    def __iand__(self, other):
        return self._in_place(other, intersection, keep_if_in_bitmap=True)

    def __sub__(self, other):
        return self._binary(other, difference)

    def __isub__(self, other):
        return self._in_place(other, difference, keep_if_in_bitmap=False)

    def __xor__(self, other):
        return self._binary(other, symmetric_difference)

    def __ixor__(self, other):
        return self._in_place(other, symmetric_difference)