import pytest

from roarstore.array_store import ArrayStore
from roarstore.store import Store


def array(values):
    return Store(ArrayStore(values))


def bitmap(values):
    return array(values).to_bitmap()


def _convert(store, as_bitmap):
    return store.to_bitmap() if as_bitmap else store


def test_default_store_is_empty_array():
    store = Store()
    assert len(store) == 0
    assert store.is_bitmap() is False
    assert store.to_list() == []


def test_rejects_foreign_inner():
    with pytest.raises(TypeError):
        Store([1, 2, 3])


def test_array_insert_invalid_range():
    store = array([1, 2, 8, 9])
    assert store.insert_range(6, 1) == 0
    assert store.to_list() == [1, 2, 8, 9]


def test_array_insert_range():
    store = array([1, 2, 8, 9])
    assert store.insert_range(4, 5) == 2
    assert store.to_list() == [1, 2, 4, 5, 8, 9]


def test_array_insert_range_left_overlap():
    store = array([1, 2, 8, 9])
    assert store.insert_range(2, 5) == 3
    assert store.to_list() == [1, 2, 3, 4, 5, 8, 9]


def test_array_insert_range_right_overlap():
    store = array([1, 2, 8, 9])
    assert store.insert_range(4, 8) == 4
    assert store.to_list() == [1, 2, 4, 5, 6, 7, 8, 9]


def test_array_insert_range_full_overlap():
    store = array([1, 2, 8, 9])
    assert store.insert_range(1, 9) == 5
    assert store.to_list() == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_bitmap_insert_invalid_range():
    store = bitmap([1, 2, 8, 9])
    assert store.insert_range(6, 1) == 0
    assert store.to_list() == [1, 2, 8, 9]


def test_bitmap_insert_same_key_overlap():
    store = bitmap([1, 2, 3, 62, 63])
    assert store.insert_range(1, 62) == 58
    assert store.to_list() == list(range(1, 64))


def test_bitmap_insert_range():
    store = bitmap([1, 2, 130])
    assert store.insert_range(4, 128) == 125
    assert store.to_list() == [1, 2] + list(range(4, 129)) + [130]


def test_bitmap_insert_range_left_overlap():
    store = bitmap([1, 2, 130])
    assert store.insert_range(1, 128) == 126
    assert store.to_list() == list(range(1, 129)) + [130]


def test_bitmap_insert_range_right_overlap():
    store = bitmap([1, 2, 130])
    assert store.insert_range(4, 132) == 128
    assert store.to_list() == [1, 2] + list(range(4, 133))


def test_bitmap_insert_range_full_overlap():
    store = bitmap([1, 2, 130])
    assert store.insert_range(1, 134) == 131
    assert store.to_list() == list(range(1, 135))


@pytest.mark.parametrize("as_bitmap", [False, True])
def test_basic_queries(as_bitmap):
    store = _convert(Store(ArrayStore([3, 10, 70, 500])), as_bitmap)
    assert store.is_bitmap() is as_bitmap
    assert 70 in store
    assert 71 not in store
    assert store.min() == 3
    assert store.max() == 500
    assert store.rank(70) == 3
    assert store.rank(2) == 0
    assert store.select(1) == 10
    assert store.select(4) is None
    assert len(store) == 4


@pytest.mark.parametrize("as_bitmap", [False, True])
def test_insert_remove_push(as_bitmap):
    store = _convert(Store(ArrayStore([5])), as_bitmap)
    assert store.insert(7) is True
    assert store.insert(7) is False
    assert store.remove(5) is True
    assert store.remove(5) is False
    assert store.push(6) is False
    assert store.push(9) is True
    assert store.to_list() == [7, 9]


@pytest.mark.parametrize("as_bitmap", [False, True])
def test_push_unchecked_rejects_non_increasing(as_bitmap):
    store = _convert(Store(ArrayStore([5, 9])), as_bitmap)
    with pytest.raises(ValueError):
        store.push_unchecked(9)
    store.push_unchecked(10)
    assert store.to_list() == [5, 9, 10]


@pytest.mark.parametrize("as_bitmap", [False, True])
def test_remove_range(as_bitmap):
    store = _convert(Store(ArrayStore([1, 5, 64, 65, 200, 300])), as_bitmap)
    assert store.remove_range(5, 200) == 4
    assert store.to_list() == [1, 300]
    assert store.remove_range(10, 2) == 0


@pytest.mark.parametrize("left", [False, True])
@pytest.mark.parametrize("right", [False, True])
def test_binary_operations(left, right):
    a = _convert(Store(ArrayStore([1, 2, 3, 100])), left)
    b = _convert(Store(ArrayStore([2, 3, 4, 200])), right)
    assert (a | b).to_list() == [1, 2, 3, 4, 100, 200]
    assert (a & b).to_list() == [2, 3]
    assert (a - b).to_list() == [1, 100]
    assert (a ^ b).to_list() == [1, 4, 100, 200]
    assert a.to_list() == [1, 2, 3, 100]
    assert b.to_list() == [2, 3, 4, 200]


@pytest.mark.parametrize("left", [False, True])
@pytest.mark.parametrize("right", [False, True])
def test_in_place_operations(left, right):
    b = _convert(Store(ArrayStore([2, 3, 4, 200])), right)

    store = _convert(Store(ArrayStore([1, 2, 3, 100])), left)
    store |= b
    assert store.to_list() == [1, 2, 3, 4, 100, 200]
    assert len(store) == 6

    store = _convert(Store(ArrayStore([1, 2, 3, 100])), left)
    store &= b
    assert store.to_list() == [2, 3]
    assert len(store) == 2

    store = _convert(Store(ArrayStore([1, 2, 3, 100])), left)
    store -= b
    assert store.to_list() == [1, 100]
    assert len(store) == 2

    store = _convert(Store(ArrayStore([1, 2, 3, 100])), left)
    store ^= b
    assert store.to_list() == [1, 4, 100, 200]
    assert len(store) == 4

    assert b.to_list() == [2, 3, 4, 200]


def test_result_representations():
    a = array([1, 2])
    b = bitmap([2, 3])
    assert (a | b).is_bitmap() is True
    assert (b & a).is_bitmap() is False
    assert (a & b).is_bitmap() is False
    assert (a ^ b).is_bitmap() is True
    assert (a | array([9])).is_bitmap() is False


def test_in_place_changes_representation():
    store = bitmap([1, 2, 3])
    store &= array([2, 3, 4])
    assert store.is_bitmap() is False
    assert store.to_list() == [2, 3]

    store = array([1])
    store |= bitmap([5])
    assert store.is_bitmap() is True
    assert store.to_list() == [1, 5]


@pytest.mark.parametrize("left", [False, True])
@pytest.mark.parametrize("right", [False, True])
def test_is_disjoint(left, right):
    a = _convert(Store(ArrayStore([1, 2])), left)
    assert a.is_disjoint(_convert(Store(ArrayStore([3, 4])), right)) is True
    assert a.is_disjoint(_convert(Store(ArrayStore([2, 4])), right)) is False


def test_is_subset():
    assert array([1, 2]).is_subset(array([1, 2, 3])) is True
    assert array([1, 5]).is_subset(array([1, 2, 3])) is False
    assert bitmap([1, 2]).is_subset(bitmap([1, 2, 3])) is True
    assert array([1, 2]).is_subset(bitmap([1, 2, 3])) is True
    assert array([1, 4]).is_subset(bitmap([1, 2, 3])) is False
    assert bitmap([1]).is_subset(array([1, 2, 3])) is False


def test_equality():
    assert array([1, 2]) == array([1, 2])
    assert bitmap([1, 2]) == bitmap([1, 2])
    assert (array([1, 2]) == bitmap([1, 2])) is False
    assert (array([1, 2]) == array([1, 3])) is False


def test_copy_is_independent():
    store = array([1, 2])
    clone = store.copy()
    clone.insert(3)
    assert store.to_list() == [1, 2]
    assert clone.to_list() == [1, 2, 3]


def test_to_bitmap_keeps_values():
    store = array([0, 64, 65535])
    converted = store.to_bitmap()
    assert converted.is_bitmap() is True
    assert converted.to_list() == [0, 64, 65535]
    assert list(converted) == [0, 64, 65535]