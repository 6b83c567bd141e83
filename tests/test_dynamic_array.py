import pytest

from dsalgo.dynamic_array import DynamicArray


def test_default_capacity():
    assert DynamicArray().capacity == 8


@pytest.mark.parametrize("size", [0, 1, 2, 3, 5, 8, 9, 100])
def test_sized_capacity_is_power_of_two(size):
    capacity = DynamicArray(size).capacity
    assert capacity >= max(size, 1)
    assert capacity & (capacity - 1) == 0
    assert capacity < 2 * max(size, 1)


def test_append_and_iterate():
    arr = DynamicArray()
    for value in range(20):
        arr.append(value)
    assert list(arr) == list(range(20))
    assert len(arr) == 20
    assert arr.capacity >= len(arr)


def test_growth_doubles_capacity():
    arr = DynamicArray()
    while len(arr) < arr.capacity:
        arr.append(len(arr))
    before = arr.capacity
    arr.append(-1)
    assert arr.capacity == before * 2
    assert arr[len(arr) - 1] == -1


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_insert_positions(index):
    arr = DynamicArray()
    for value in ("a", "b", "c"):
        arr.append(value)
    expected = ["a", "b", "c"]
    arr.insert(index, "z")
    expected.insert(index, "z")
    assert list(arr) == expected


def test_insert_when_full_keeps_order():
    arr = DynamicArray(2)
    arr.append(1)
    arr.append(2)
    arr.insert(1, 9)
    assert list(arr) == [1, 9, 2]


def test_insert_out_of_range():
    arr = DynamicArray()
    with pytest.raises(IndexError):
        arr.insert(1, "x")


def test_remove_all_occurrences():
    arr = DynamicArray()
    for value in [4, 1, 4, 4, 2]:
        arr.append(value)
    arr.remove(4)
    assert list(arr) == [1, 2]


def test_remove_at_and_shrink():
    arr = DynamicArray()
    for value in range(8):
        arr.append(value)
    assert arr.capacity == 8
    while len(arr) > 3:
        arr.remove_at(len(arr) - 1)
    assert list(arr) == [0, 1, 2]
    assert arr.capacity == 4


def test_capacity_never_drops_below_one():
    arr = DynamicArray(1)
    arr.append("x")
    arr.remove_at(0)
    arr.remove("missing")
    assert arr.capacity >= 1
    arr.append("y")
    assert list(arr) == ["y"]


def test_index_errors():
    arr = DynamicArray()
    arr.append(1)
    with pytest.raises(IndexError):
        arr[1]
    with pytest.raises(IndexError):
        arr[1] = 5
    with pytest.raises(IndexError):
        arr.remove_at(1)


def test_setitem_replaces():
    arr = DynamicArray()
    arr.append("a")
    arr[0] = "b"
    assert arr[0] == "b"


def test_str_format():
    arr = DynamicArray()
    assert str(arr) == "Data: "
    for value in (1, 2, 3):
        arr.append(value)
    assert str(arr) == "Data: 1 2 3 "