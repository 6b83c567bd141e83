import pytest

from dsalgo.varray import StringArray, main

WORDS = ["A", "Big", "Dancing", "Group", "Of", "Puppets"]


def test_default_capacity_is_sixteen():
    array = StringArray()
    assert array.capacity == 16
    assert array.is_empty()
    assert len(array) == 0


def test_capacity_rounds_up_to_power_of_two():
    assert StringArray(capacity=5).capacity == 8
    assert StringArray(capacity=16).capacity == 16
    assert StringArray(capacity=17).capacity == 32


def test_items_constructor_sets_capacity_and_contents():
    array = StringArray(WORDS)
    assert list(array) == WORDS
    assert array.capacity == 8
    assert len(array) == len(WORDS)


def test_append_doubles_capacity_when_full():
    array = StringArray(capacity=2)
    for word in WORDS[:3]:
        array.append(word)
    assert array.capacity == 4
    assert list(array) == WORDS[:3]


def test_insert_shifts_later_items():
    array = StringArray(["As", "If", "It", "Nothing"])
    array.insert(3, "was")
    assert list(array) == ["As", "If", "It", "was", "Nothing"]


def test_insert_at_end_and_out_of_range():
    array = StringArray(["x"])
    array.insert(1, "y")
    assert list(array) == ["x", "y"]
    with pytest.raises(IndexError):
        array.insert(3, "z")


def test_push_front():
    array = StringArray(["b", "c"])
    array.push_front("a")
    assert list(array) == ["a", "b", "c"]


def test_getitem_and_bounds():
    array = StringArray(WORDS)
    assert array[0] == "A"
    assert array[5] == "Puppets"
    with pytest.raises(IndexError):
        array[6]
    with pytest.raises(IndexError):
        array[-1]


def test_index_returns_minus_one_when_missing():
    array = StringArray(["If", "It", "was", "If"])
    assert array.index("If") == 0
    assert array.index("was") == 2
    assert array.index("Everything") == -1


def test_remove_drops_every_occurrence():
    array = StringArray(["As", "If", "As", "As", "It"])
    array.remove("As")
    assert list(array) == ["If", "It"]
    array.remove("missing")
    assert list(array) == ["If", "It"]


def test_remove_at_and_bounds():
    array = StringArray(WORDS)
    array.remove_at(1)
    assert list(array) == [w for w in WORDS if w != "Big"]
    with pytest.raises(IndexError):
        array.remove_at(len(array))


def test_pop_back_and_front():
    array = StringArray(WORDS)
    assert array.pop_back() == "Puppets"
    assert array.pop_front() == "A"
    assert list(array) == WORDS[1:-1]


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        StringArray().pop_back()
    with pytest.raises(IndexError):
        StringArray().pop_front()


def test_sub_array_is_inclusive():
    array = StringArray(WORDS)
    part = array.sub_array(1, 3)
    assert list(part) == WORDS[1:4]
    assert list(array) == WORDS


@pytest.mark.parametrize("start,end", [(3, 3), (4, 2), (0, 6), (6, 7)])
def test_sub_array_rejects_bad_ranges(start, end):
    with pytest.raises(IndexError):
        StringArray(WORDS).sub_array(start, end)


def test_merge_keeps_sorted_order():
    first = StringArray(["Like", "My", "New", "Pair", "Shoes"])
    merged = StringArray.merge(first, StringArray(WORDS))
    assert list(merged) == sorted(list(first) + WORDS)
    assert len(merged) == len(first) + len(WORDS)


def test_merge_accepts_plain_sequences():
    merged = StringArray.merge(["a", "c"], ["b", "d"])
    assert list(merged) == ["a", "b", "c", "d"]


def test_merge_with_empty_side():
    assert list(StringArray.merge([], WORDS)) == WORDS
    assert list(StringArray.merge(WORDS, [])) == WORDS


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "3"
    assert lines[1].split() == ["Like", "My", "New", "Pair", "Shoes"]
    assert lines[2].split() == ["If", "It", "was", "If"]
    assert lines[3].split() == WORDS
    assert lines[5].split() == ["Dancing", "Group", "Like", "My", "New", "Of"]
    assert lines[6:] == ["8", "0", "-1"]