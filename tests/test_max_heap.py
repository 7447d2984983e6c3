import pytest
from hypothesis import given
from hypothesis import strategies as st

from basicstructs.max_heap import MaxHeap

_int_lists = st.lists(st.integers(), max_size=50)


def _is_heap(heap):
    values = list(heap)
    return all(values[(index - 1) // 2] >= values[index] for index in range(1, len(values)))


def _sample_heap():
    heap = MaxHeap()
    for value in (10, 30, 20, 5, 40):
        heap.insert(value)
    return heap


def test_worked_example():
    heap = _sample_heap()
    assert heap.peek_max() == 40
    heap.remove_max()
    assert heap.peek_max() == 30
    assert heap.heap_sort() == [5, 10, 20, 30]


def test_heap_sort_preserves_heap():
    heap = _sample_heap()
    before = list(heap)
    heap.heap_sort()
    assert list(heap) == before


def test_str_matches_iteration():
    heap = _sample_heap()
    assert str(heap) == " ".join(map(str, heap))


@pytest.mark.parametrize("operation", ["peek_max", "extract_max", "remove_max"])
def test_empty_heap_errors(operation):
    heap = MaxHeap()
    assert heap.is_empty()
    with pytest.raises(IndexError):
        getattr(heap, operation)()


def test_extract_max_returns_in_descending_order():
    heap = MaxHeap([3, 9, 1, 7])
    assert [heap.extract_max() for _ in range(4)] == [9, 7, 3, 1]
    assert heap.is_empty()


def test_increase_key_moves_to_top():
    heap = _sample_heap()
    heap.increase_key(len(heap) - 1, 100)
    assert heap.peek_max() == 100
    assert _is_heap(heap)


@pytest.mark.parametrize(
    "index, value, error",
    [(0, 1, ValueError), (5, 99, IndexError)],
)
def test_increase_key_rejected(index, value, error):
    heap = _sample_heap()
    with pytest.raises(error):
        heap.increase_key(index, value)
    assert heap.peek_max() == 40


@given(_int_lists)
def test_build_keeps_heap_property(values):
    heap = MaxHeap(values)
    assert _is_heap(heap)
    assert sorted(heap) == sorted(values)
    assert len(heap) == len(values)


@given(_int_lists)
def test_insert_keeps_heap_property(values):
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
        assert _is_heap(heap)
    assert heap.heap_sort() == sorted(values)


@given(st.lists(st.integers(), min_size=1, max_size=50))
def test_peek_is_maximum(values):
    heap = MaxHeap(values)
    assert heap.peek_max() == max(values)
    heap.remove_max()
    assert _is_heap(heap)
    assert len(heap) == len(values) - 1