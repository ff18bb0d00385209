# roarstore

Containers for sets of 16-bit integers (0 to 65535), the building blocks of
Roaring bitmaps:

- `ArrayStore` (in `roarstore.array_store`): a sorted, duplicate-free list.
  It suits sparse sets.
- `BitmapStore` (in `roarstore.bitmap_store`): 1024 words of 64 bits each,
  with the cardinality kept alongside. It suits dense sets.
- `Store` (in `roarstore.store`): wraps one of the two and gives the same
  queries and set operations whichever it holds.

Helpers:

- `roarstore.util` has `split`, `join` and `convert_range_to_inclusive`,
  which move between a 32-bit value and a container key plus an index.
- `roarstore.setops` has merge-based `union`, `intersection`, `difference`
  and `symmetric_difference` over sorted, duplicate-free sequences; each
  returns a sorted list.
- `roarstore.errors` has `NonSortedIntegers`, a `ValueError` carrying
  `valid_until`.

## Installation

```
pip install .
```

## Usage

```python
from roarstore.array_store import ArrayStore
from roarstore.store import Store

store = Store(ArrayStore.from_sorted([1, 2, 8, 9]))
added = store.insert_range(4, 5)        # both ends inclusive; returns 2
assert store.to_list() == [1, 2, 4, 5, 8, 9]

dense = store.to_bitmap()               # the same values in a bitmap container
assert dense.is_bitmap()
assert dense.rank(5) == 4               # how many values are <= 5
assert dense.select(0) == 1             # the smallest value
assert list(dense | store) == [1, 2, 4, 5, 8, 9]
```

```python
from roarstore.util import split, join, convert_range_to_inclusive

assert split(0x0001_0002) == (1, 2)
assert join(1, 2) == 0x0001_0002
assert convert_range_to_inclusive(1, 6) == (1, 5)
assert convert_range_to_inclusive(5, 5) is None
```

### Behaviour worth knowing

- `insert`, `remove` and `push` return whether the set changed;
  `insert_range` and `remove_range` take inclusive bounds and return how
  many values were added or removed. A range with `start > end` changes
  nothing and returns 0.
- `push` adds a value only if it is larger than every value present;
  `push_unchecked` raises `ValueError` when it is not.
- `min()` and `max()` return `None` for an empty set, and so does
  `select(n)` when `n` is out of range. `rank(i)` counts values `<= i`.
- Values outside 0..65535 raise `ValueError`; `in` simply answers `False`
  for them.
- `Store` objects combine with `|`, `&`, `-` and `^` and their in-place
  forms. The result of `|` and `^` between an array and a bitmap is a
  bitmap; the result of `&` between them is an array. Two `Store`s compare
  equal only when they hold the same values in the same kind of container.
- `ArrayStore` supports `|`, `&`, `-`, `^` with another `ArrayStore`, and
  `&=` and `-=` with a `BitmapStore` too. `BitmapStore` supports `|=`,
  `&=`, `-=`, `^=` with another `BitmapStore`, and `|=`, `-=`, `^=` with
  an `ArrayStore`.
- `is_disjoint` and `is_subset` on a `Store` work across both container
  kinds, except that a bitmap is never reported as a subset of an array.

Input is checked where it is built:

- `ArrayStore(values)` raises `ArrayStoreError` (with `index` and an
  `ArrayErrorKind` of `DUPLICATE` or `OUT_OF_ORDER`) when the values are
  repeated or out of order. `ArrayStore.from_sorted` trusts its input.
- `BitmapStore.from_words(length, words)` needs exactly 1024 words and
  raises `CardinalityError` when `length` does not match the bits set.

Conversions: `ArrayStore.to_bitmap_store()`, `BitmapStore.to_array_store()`
and `Store.to_bitmap()`; `BitmapStore.words()` returns the raw words.

## What this package does not do

It provides only the 16-bit containers and their helpers. There is no
32-bit or 64-bit bitmap that groups containers by key, no automatic
switching between array and bitmap containers as a set grows or shrinks,
no run-length containers and no serialization format.

## Tests

```
pip install ".[test]"
pytest
```