"""Dense container: a fixed array of 64-bit words, one bit per 16-bit value."""

from operator import and_, or_, xor
from operator import index as _as_int

BITMAP_LENGTH = 1024
_WORD_MASK = (1 << 64) - 1
_MAX_INDEX = 0xFFFF


class CardinalityError(ValueError):
    """Raised when a declared length does not match the number of set bits."""

    def __init__(self, expected, actual):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return f"Expected cardinality was {self.expected} but was {self.actual}"


def _check_index(index):
    index = _as_int(index)
    if not 0 <= index <= _MAX_INDEX:
        raise ValueError(f"index {index} is outside 0..=65535")
    return index


def _check_range(start, end):
    """Validate both bounds; ``None`` when the inclusive range is empty."""
    start, end = _check_index(start), _check_index(end)
    return (start, end) if start <= end else None


def _check_rank(n):
    n = _as_int(n)
    if n < 0:
        raise ValueError("n must not be negative")
    return n


def _trailing_zeros(word):
    if word == 0:
        return 64
    return (word & -word).bit_length() - 1


def word_key(index):
    """Position of the word holding ``index``."""
    return index // 64


def word_bit(index):
    """Position of ``index``'s bit inside its word."""
    return index % 64


def select_in_word(value, n):
    """Bit position of the ``n``-th set bit of ``value``; 64 if there is none."""
    for _ in range(n):
        value &= value - 1
    return _trailing_zeros(value)


def _range_masks(start, end):
    """Yield ``(word key, mask)`` pairs covering the inclusive range ``start..=end``."""
    start_key, start_bit = divmod(start, 64)
    end_key, end_bit = divmod(end, 64)
    if start_key == end_key:
        yield start_key, ((1 << (end_bit - start_bit + 1)) - 1) << start_bit
        return
    yield start_key, (_WORD_MASK >> start_bit) << start_bit
    for key in range(start_key + 1, end_key):
        yield key, _WORD_MASK
    yield end_key, (1 << (end_bit + 1)) - 1


def _push(store, index):
    """Add ``index`` to ``store`` only if it is larger than every value present."""
    index = _check_index(index)
    current = store.max()
    if current is not None and index <= current:
        return False
    store._append(index)
    return True


def _push_unchecked(store, index):
    """Add ``index``, which must be larger than every value already present."""
    if not _push(store, index):
        raise ValueError("store max >= index")


def _contains(store, index):
    try:
        index = _check_index(index)
    except (TypeError, ValueError):
        return False
    return store._has(index)


class BitmapStore:
    """A set of 16-bit values stored as a bitmap of 1024 64-bit words."""

    __slots__ = ("_len", "_bits")
    __hash__ = None

    def __init__(self):
        self._len = 0
        self._bits = [0] * BITMAP_LENGTH

    @classmethod
    def from_words(cls, length, words):
        """Build a store from its words, checking ``length`` against the bits set."""
        words = [_as_int(word) for word in words]
        if len(words) != BITMAP_LENGTH:
            raise ValueError(f"expected {BITMAP_LENGTH} words, got {len(words)}")
        if any(not 0 <= word <= _WORD_MASK for word in words):
            raise ValueError("every word must be a 64-bit unsigned integer")
        actual = sum(word.bit_count() for word in words)
        if length != actual:
            raise CardinalityError(length, actual)
        store = cls()
        store._len = actual
        store._bits = words
        return store

    def _update_range(self, start, end, setting):
        changed = 0
        bits = self._bits
        for key, mask in _range_masks(start, end):
            present = (bits[key] & mask).bit_count()
            if setting:
                changed += mask.bit_count() - present
                bits[key] |= mask
            else:
                changed += present
                bits[key] &= ~mask
        self._len += changed if setting else -changed
        return changed

    def _has(self, index):
        key, bit = divmod(index, 64)
        return bool(self._bits[key] >> bit & 1)

    def _append(self, index):
        self.insert(index)

    def _toggle(self, value):
        value = _check_index(value)
        key, bit = divmod(value, 64)
        old = self._bits[key]
        self._bits[key] = old ^ (1 << bit)
        self._len += -1 if old >> bit & 1 else 1

    def _word_op(self, other, combine, per_value):
        """Word-wise with a bitmap, value by value with any other container."""
        if isinstance(other, BitmapStore):
            self._bits = [combine(a, b) for a, b in zip(self._bits, other._bits)]
            self._len = sum(word.bit_count() for word in self._bits)
        elif per_value is None:
            return NotImplemented
        else:
            for value in other:
                per_value(value)
        return self

    def insert(self, index):
        """Set the bit for ``index``; return whether it was clear before."""
        index = _check_index(index)
        return self._update_range(index, index, True) == 1

    def insert_range(self, start, end):
        """Set every bit in ``start..=end``; return how many were clear."""
        bounds = _check_range(start, end)
        return 0 if bounds is None else self._update_range(*bounds, True)

    def push(self, index):
        """Add ``index`` only if it is larger than every value; return whether it was added."""
        return _push(self, index)

    def push_unchecked(self, index):
        """Add ``index``, which must be larger than every value already present."""
        _push_unchecked(self, index)

    def remove(self, index):
        """Clear the bit for ``index``; return whether it was set."""
        index = _check_index(index)
        return self._update_range(index, index, False) == 1

    def remove_range(self, start, end):
        """Clear every bit in ``start..=end``; return how many were set."""
        bounds = _check_range(start, end)
        return 0 if bounds is None else self._update_range(*bounds, False)

    def __contains__(self, index):
        return _contains(self, index)

    def is_disjoint(self, other):
        return all(a & b == 0 for a, b in zip(self._bits, other._bits))

    def is_subset(self, other):
        return all(a & b == a for a, b in zip(self._bits, other._bits))

    def to_array_store(self):
        """Return the same values as a sorted-array container."""
        from .array_store import ArrayStore

        return ArrayStore.from_sorted(list(self))

    def __len__(self):
        return self._len

    def min(self):
        """Position of the lowest set bit, or ``None`` when no bit is set."""
        return next(
            (key * 64 + _trailing_zeros(word) for key, word in enumerate(self._bits) if word),
            None,
        )

    def max(self):
        """Position of the highest set bit, or ``None`` when no bit is set."""
        return next(
            (
                key * 64 + word.bit_length() - 1
                for key, word in reversed(list(enumerate(self._bits)))
                if word
            ),
            None,
        )

    def rank(self, index):
        """Count of set bits at positions up to and including ``index``."""
        index = _check_index(index)
        key, bit = divmod(index, 64)
        below = sum(word.bit_count() for word in self._bits[:key])
        return below + (self._bits[key] & ((1 << (bit + 1)) - 1)).bit_count()

    def select(self, n):
        """Position of the ``n``-th set bit (from zero), or ``None`` if there are fewer."""
        n = _check_rank(n)
        for key, word in enumerate(self._bits):
            count = word.bit_count()
            if n < count:
                return key * 64 + select_in_word(word, n)
            n -= count
        return None

    def __iter__(self):
        for key, word in enumerate(tuple(self._bits)):
            while word:
                lowest = word & -word
                yield key * 64 + lowest.bit_length() - 1
                word ^= lowest

    def words(self):
        """The 1024 words of the bitmap, as a tuple."""
        return tuple(self._bits)

    def copy(self):
        clone = BitmapStore()
        clone._len = self._len
        clone._bits = list(self._bits)
        return clone

    def __eq__(self, other):
        if not isinstance(other, BitmapStore):
            return NotImplemented
        return self._len == other._len and self._bits == other._bits

    def __repr__(self):
        return f"BitmapStore(len={self._len})"

    def __ior__(self, other):
        return self._word_op(other, or_, self.insert)

    def __iand__(self, other):
        return self._word_op(other, and_, None)

    def __isub__(self, other):
        return self._word_op(other, lambda a, b: a & ~b, self.remove)

    def __ixor__(self, other):
        return self._word_op(other, xor, self._toggle)