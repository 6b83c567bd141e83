import pytest

from dsalgo.linked_list import Cursor, LinkedList


def test_append_and_iterate():
    items = LinkedList()
    for value in range(10):
        items.append(value)
    assert list(items) == list(range(10))
    assert len(items) == 10


def test_copy_is_independent():
    original = LinkedList(range(5))
    copy = LinkedList(original)
    copy.append(99)
    copy[0] = -1
    assert list(original) == list(range(5))
    assert list(copy) == [-1, 1, 2, 3, 4, 99]


def test_getitem_and_setitem():
    items = LinkedList(range(10))
    for index in range(10):
        items[index] = index * 20
    assert [items[i] for i in range(10)] == [i * 20 for i in range(10)]
    assert items[-1] == items[9]


@pytest.mark.parametrize("index", [10, 11, -11])
def test_index_out_of_range(index):
    items = LinkedList(range(10))
    with pytest.raises(IndexError):
        items[index]
    with pytest.raises(IndexError):
        items[index] = 0
    with pytest.raises(IndexError):
        items.remove_at(index)


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_insert_positions(index):
    items = LinkedList([10, 20, 30])
    expected = [10, 20, 30]
    items.insert(index, 7)
    expected.insert(index, 7)
    assert list(items) == expected
    assert items[index] == 7
    assert list(reversed(list(items))) == _walk_backwards(items)


def test_insert_out_of_range():
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.insert(3, 5)


def test_insert_into_empty():
    items = LinkedList()
    items.insert(0, "a")
    assert list(items) == ["a"]


def test_remove_all_occurrences():
    items = LinkedList([2, 1, 2, 3, 2])
    removed = items.remove(2)
    assert removed == 3
    assert list(items) == [1, 3]
    assert len(items) == 2
    assert _walk_backwards(items) == [3, 1]


def test_remove_missing_value_changes_nothing():
    items = LinkedList(range(4))
    assert items.remove(42) == 0
    assert list(items) == list(range(4))


def test_remove_at_ends_and_middle():
    items = LinkedList(range(6))
    items.remove_at(0)
    items.remove_at(len(items) - 1)
    items.remove_at(1)
    assert list(items) == [1, 3, 4]
    assert _walk_backwards(items) == [4, 3, 1]


def test_remove_at_only_element():
    items = LinkedList(["x"])
    items.remove_at(0)
    assert len(items) == 0
    assert list(items) == []
    items.append("y")
    assert list(items) == ["y"]


def test_str_formats():
    assert str(LinkedList()) == "No data available"
    assert str(LinkedList([1, 2, 3])) == " 1 2 3"


def test_cursor_walks_both_ways():
    items = LinkedList(range(5))
    cursor = items.first()
    seen = [cursor.value]
    while cursor != items.last():
        cursor.advance()
        seen.append(cursor.value)
    assert seen == list(range(5))
    with pytest.raises(IndexError):
        cursor.advance()
    back = []
    while cursor != items.first():
        back.append(cursor.value)
        cursor.retreat()
    back.append(cursor.value)
    assert back == list(range(4, -1, -1))
    with pytest.raises(IndexError):
        cursor.retreat()


def test_cursor_at_index_and_equality():
    items = LinkedList("abcd")
    assert items.cursor(0) == items.first()
    assert items.cursor(3) == items.last()
    assert items.cursor(2).value == "c"
    assert not (items.cursor(1) == items.cursor(2))
    with pytest.raises(IndexError):
        items.cursor(4)


def test_cursor_copy_moves_independently():
    items = LinkedList(range(3))
    a = items.first()
    b = Cursor(a.node)
    b.advance()
    assert a.value == 0
    assert b.value == 1


def test_cursor_value_writes_through():
    items = LinkedList([1, 2, 3])
    cursor = items.cursor(1)
    cursor.value = 50
    assert list(items) == [1, 50, 3]


def test_first_and_last_on_empty_raise():
    items = LinkedList()
    with pytest.raises(IndexError):
        items.first()
    with pytest.raises(IndexError):
        items.last()


def _walk_backwards(items):
    cursor = items.last()
    values = [cursor.value]
    while cursor != items.first():
        cursor.retreat()
        values.append(cursor.value)
    return values