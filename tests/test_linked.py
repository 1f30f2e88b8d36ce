import pytest

from perpustakaan.linked import DataType, LinkedList


def ints(*values):
    return LinkedList(DataType.INT, values)


def strs(*values):
    return LinkedList(DataType.STRING, values)


def test_new_list_is_empty():
    lst = LinkedList(DataType.INT)
    assert lst.is_empty()
    assert len(lst) == 0
    assert not lst


def test_append_and_prepend_order():
    lst = ints()
    lst.append(2)
    lst.append(3)
    lst.prepend(1)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert bool(lst)


def test_type_mismatch_raises():
    with pytest.raises(TypeError):
        ints().append("a")
    with pytest.raises(TypeError):
        strs().prepend(5)


def test_insert_after_found_and_missing():
    lst = ints(1, 2, 3)
    assert lst.insert_after(2, 9) is True
    assert list(lst) == [1, 2, 9, 3]
    assert lst.insert_after(42, 7) is False
    assert list(lst) == [1, 2, 9, 3]


def test_insert_before_first_and_middle():
    lst = strs("b", "c")
    assert lst.insert_before("b", "a") is True
    assert lst.insert_before("c", "x") is True
    assert list(lst) == ["a", "b", "x", "c"]
    assert lst.insert_before("zz", "q") is False
    assert len(lst) == 4


def test_insert_on_empty_does_nothing():
    lst = ints()
    assert lst.insert_after(1, 2) is False
    assert lst.insert_before(1, 2) is False
    assert lst.is_empty()


def test_pop_first_and_last():
    lst = ints(1, 2, 3)
    assert lst.pop_first() == 1
    assert lst.pop_last() == 3
    assert list(lst) == [2]
    assert lst.pop_last() == 2
    assert lst.is_empty()


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        ints().pop_first()
    with pytest.raises(IndexError):
        strs().pop_last()


def test_remove_first_occurrence_only():
    lst = ints(5, 1, 5)
    assert lst.remove(5) is True
    assert list(lst) == [1, 5]
    assert lst.remove(7) is False
    assert list(lst) == [1, 5]


def test_clear():
    lst = strs("a", "b")
    lst.clear()
    assert lst.is_empty()
    assert list(lst) == []


def test_contains_respects_type():
    lst = ints(1, 2)
    assert lst.contains(2)
    assert not lst.contains(3)
    assert not lst.contains("2")
    assert strs("x").contains("x")


def test_predecessor():
    lst = ints(4, 5, 6)
    assert lst.predecessor(6) == 5
    assert lst.predecessor(4) is None
    assert lst.predecessor(99) is None
    assert strs("a", "b").predecessor("b") is None


def test_reversed_copy_leaves_original():
    lst = ints(1, 2, 3)
    rev = lst.reversed_copy()
    assert list(rev) == [3, 2, 1]
    assert list(lst) == [1, 2, 3]
    assert rev.data_type is DataType.INT


def test_reverse_twice_is_identity():
    lst = strs("a", "b", "c")
    lst.reverse()
    assert list(lst) == ["c", "b", "a"]
    lst.reverse()
    assert list(lst) == ["a", "b", "c"]


def test_copy_is_independent():
    lst = ints(1, 2)
    dup = lst.copy()
    dup.append(3)
    assert list(lst) == [1, 2]
    assert list(dup) == [1, 2, 3]


def test_front_and_tail():
    lst = strs("a", "b", "c")
    assert lst.front() == "a"
    assert lst.tail() == "c"


def test_front_and_tail_of_empty_lists():
    assert ints().front() == 0
    assert ints().tail() == 0
    assert strs().front() is None
    assert strs().tail() is None


def test_format_empty():
    assert ints().format() == "List Kosong\n"
    assert strs().format() == "List Kosong\n"


def test_format_values():
    assert ints(1, 2, 3).format() == "1, 2, 3\n"
    assert strs("a", "b").format() == "a, b\n\n"


def test_iteration_is_snapshot():
    lst = ints(1, 2)
    seen = []
    for value in lst:
        seen.append(value)
        lst.append(value * 10)
    assert seen == [1, 2]
    assert len(lst) == 4