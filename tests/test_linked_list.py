import pytest
from hypothesis import given
from hypothesis import strategies as st

from basicstructs.linked_list import LinkedList


def test_worked_example_display_and_reverse():
    items = LinkedList()
    items.push_front(20)
    items.push_front(10)
    items.push_back(30)
    assert str(items) == "10 20 30"
    items.reverse()
    assert str(items) == "30 20 10"


def test_reverse_keeps_tail_usable():
    items = LinkedList([1, 2, 3])
    items.reverse()
    items.push_back(0)
    assert list(items) == [3, 2, 1, 0]


def test_reverse_empty():
    items = LinkedList()
    items.reverse()
    assert list(items) == []


def test_pop_front_and_back():
    items = LinkedList([1, 2, 3])
    assert items.pop_front() == 1
    assert items.pop_back() == 3
    assert list(items) == [2]
    assert items.pop_back() == 2
    assert items.is_empty()


def test_pop_back_then_push_back():
    items = LinkedList([1, 2, 3])
    items.pop_back()
    items.push_back(4)
    assert list(items) == [1, 2, 4]


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_at():
    items = LinkedList([5, 6, 7])
    assert items.at(0) == 5
    assert items.at(2) == 7
    with pytest.raises(IndexError):
        items.at(3)
    with pytest.raises(IndexError):
        items.at(-1)


def test_max_min():
    items = LinkedList([4, -2, 9, 0])
    assert items.max() == 9
    assert items.min() == -2


def test_max_min_empty_raise():
    with pytest.raises(ValueError):
        LinkedList().max()
    with pytest.raises(ValueError):
        LinkedList().min()


def test_index_of():
    items = LinkedList([4, 5, 4])
    assert items.index_of(4) == 0
    assert items.index_of(5) == 1
    with pytest.raises(ValueError):
        items.index_of(6)


def test_insert_positions():
    items = LinkedList([1, 3])
    items.insert(1, 2)
    items.insert(0, 0)
    items.insert(len(items), 4)
    assert list(items) == [0, 1, 2, 3, 4]
    assert len(items) == 5


def test_insert_into_empty():
    items = LinkedList()
    items.insert(0, 7)
    assert list(items) == [7]


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        LinkedList([1]).insert(3, 9)


def test_delete_positions():
    items = LinkedList([1, 2, 3, 4, 5])
    items.delete(2)
    items.delete(0)
    items.delete(len(items) - 1)
    assert list(items) == [2, 4]
    with pytest.raises(IndexError):
        items.delete(2)


def test_has_cycle_detects_loop():
    items = LinkedList([1, 2, 3])
    assert not items.has_cycle()
    items._tail.next = items._head
    assert items.has_cycle()


def test_extend_with_itself():
    items = LinkedList([1, 2])
    items.extend(items)
    assert list(items) == [1, 2, 1, 2]
    assert not items.has_cycle()


def test_extend_other():
    items = LinkedList()
    items.extend(LinkedList([8, 9]))
    items.push_back(10)
    assert list(items) == [8, 9, 10]


@given(st.lists(st.integers(), max_size=40))
def test_push_sorted_keeps_order(values):
    items = LinkedList()
    for value in values:
        items.push_sorted(value)
    assert list(items) == sorted(values)
    assert items.is_sorted()
    assert len(items) == len(values)


@given(st.lists(st.integers(), min_size=2, max_size=40))
def test_is_sorted_matches_definition(values):
    items = LinkedList(values)
    assert items.is_sorted() == (values == sorted(values))


@given(st.lists(st.integers(), max_size=40))
def test_reverse_twice_round_trip(values):
    items = LinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    items.reverse()
    assert list(items) == values