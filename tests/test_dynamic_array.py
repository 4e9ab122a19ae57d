import pytest

from hashcache.dynamic_array import DynamicArray


def test_new_array_has_requested_capacity_of_empty_slots():
    array = DynamicArray(4)
    assert len(array) == 4
    assert array.capacity == 4
    assert list(array) == [None, None, None, None]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)


def test_from_iterable_copies_items():
    source = [1, 2, 3]
    array = DynamicArray.from_iterable(source)
    source.append(9)
    assert list(array) == [1, 2, 3]


def test_from_none_rejected():
    with pytest.raises(ValueError):
        DynamicArray.from_iterable(None)


def test_set_and_get_round_trip():
    array = DynamicArray(3)
    array[0] = "a"
    array[2] = "c"
    assert array[0] == "a"
    assert array[1] is None
    assert array[2] == "c"


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_out_of_range_access_raises(index):
    array = DynamicArray.from_iterable([1, 2, 3])
    with pytest.raises(IndexError):
        array[index]
    with pytest.raises(IndexError):
        array[index] = 1
    assert list(array) == [1, 2, 3]
    assert len(array) == 3


def test_recapacity_grow_keeps_prefix():
    array = DynamicArray.from_iterable([5, 6])
    array.recapacity(4)
    assert array.capacity == 4
    assert list(array) == [5, 6, None, None]


def test_recapacity_shrink_truncates():
    array = DynamicArray.from_iterable([5, 6, 7])
    array.recapacity(1)
    assert list(array) == [5]
    array.recapacity(0)
    assert len(array) == 0


def test_recapacity_negative_rejected():
    array = DynamicArray(2)
    with pytest.raises(ValueError):
        array.recapacity(-2)


def test_delete_removes_and_shrinks():
    array = DynamicArray.from_iterable([10, 20, 30])
    array.delete(1)
    assert list(array) == [10, 30]
    assert array.capacity == 2


@pytest.mark.parametrize("index", [-1, 3])
def test_delete_invalid_index(index):
    array = DynamicArray.from_iterable([10, 20, 30])
    with pytest.raises(IndexError):
        array.delete(index)
    assert list(array) == [10, 20, 30]


def test_swap_exchanges_contents():
    left = DynamicArray.from_iterable([1, 2])
    right = DynamicArray.from_iterable(["x", "y", "z"])
    left.swap(right)
    assert list(left) == ["x", "y", "z"]
    assert list(right) == [1, 2]
    assert left.capacity == 3
    assert right.capacity == 2