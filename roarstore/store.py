"""A container of 16-bit values held either as a sorted array or as a bitmap."""

from operator import iand, ior, isub, ixor

from .array_store import ArrayStore
from .bitmap_store import BitmapStore

_ARRAY_BITMAP = (ArrayStore, BitmapStore)
_BITMAP_ARRAY = (BitmapStore, ArrayStore)


class Store:
    """A set of 16-bit values backed by an array or a bitmap container.

    Queries and updates are answered by the underlying container.
    """

    __slots__ = ("_inner",)
    __hash__ = None

    def __init__(self, inner=None):
        if inner is None:
            inner = ArrayStore()
        if not isinstance(inner, (ArrayStore, BitmapStore)):
            raise TypeError(f"expected ArrayStore or BitmapStore, got {type(inner).__name__}")
        self._inner = inner

    @property
    def inner(self):
        """The underlying container."""
        return self._inner

    def _combine(self, other, combine, swap_when, in_place):
        """Apply a set operator between two stores.

        When the container kinds match ``swap_when`` the right-hand container is
        copied and used as the target, so the result takes its kind.
        """
        if not isinstance(other, Store):
            return NotImplemented
        target = self if in_place else self.copy()
        mine, theirs = target._inner, other._inner
        if (type(mine), type(theirs)) == swap_when:
            mine, theirs = theirs.copy(), mine
        target._inner = combine(mine, theirs)
        return target

    def is_bitmap(self):
        """Whether the values are held in a bitmap container."""
        return isinstance(self._inner, BitmapStore)

    def to_list(self):
        """The values, sorted, as a new list."""
        return list(self._inner)

    def to_bitmap(self):
        """Return a new store holding the same values in a bitmap container."""
        if isinstance(self._inner, BitmapStore):
            return Store(self._inner.copy())
        return Store(self._inner.to_bitmap_store())

    def insert(self, index):
        return self._inner.insert(index)

    def insert_range(self, start, end):
        if start > end:
            return 0
        return self._inner.insert_range(start, end)

    def push(self, index):
        return self._inner.push(index)

    def push_unchecked(self, index):
        self._inner.push_unchecked(index)

    def remove(self, index):
        return self._inner.remove(index)

    def remove_range(self, start, end):
        if start > end:
            return 0
        return self._inner.remove_range(start, end)

    def __contains__(self, index):
        return index in self._inner

    def is_disjoint(self, other):
        mine, theirs = self._inner, other._inner
        if type(mine) is type(theirs):
            return mine.is_disjoint(theirs)
        array, bitmap = (mine, theirs) if isinstance(mine, ArrayStore) else (theirs, mine)
        return all(value not in bitmap for value in array)

    def is_subset(self, other):
        mine, theirs = self._inner, other._inner
        if type(mine) is type(theirs):
            return mine.is_subset(theirs)
        if isinstance(mine, ArrayStore):
            return all(value in theirs for value in mine)
        return False

    def __len__(self):
        return len(self._inner)

    def min(self):
        return self._inner.min()

    def max(self):
        return self._inner.max()

    def rank(self, index):
        return self._inner.rank(index)

    def select(self, n):
        return self._inner.select(n)

    def __iter__(self):
        return iter(self._inner)

    def copy(self):
        return Store(self._inner.copy())

    def __eq__(self, other):
        if not isinstance(other, Store):
            return NotImplemented
        if type(self._inner) is not type(other._inner):
            return False
        return self._inner == other._inner

    def __repr__(self):
        return f"Store({self._inner!r})"

    def __or__(self, other):
        return self._combine(other, ior, _ARRAY_BITMAP, in_place=False)

    def __ior__(self, other):
        return self._combine(other, ior, _ARRAY_BITMAP, in_place=True)

    def __and__(self, other):
        return self._combine(other, iand, _BITMAP_ARRAY, in_place=False)

    def __iand__(self, other):
        return self._combine(other, iand, _BITMAP_ARRAY, in_place=True)

    def __sub__(self, other):
        return self._combine(other, isub, None, in_place=False)

    def __isub__(self, other):
        return self._combine(other, isub, None, in_place=True)

    def __xor__(self, other):
        return self._combine(other, ixor, _ARRAY_BITMAP, in_place=False)

    def __ixor__(self, other):
        return self._combine(other, ixor, _ARRAY_BITMAP, in_place=True)