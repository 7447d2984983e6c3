"""A binary max-heap stored in a list."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class MaxHeap:
    """Max-heap whose largest value sits at position 0."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._heap: list[Any] = list(values)
        for index in range(len(self._heap) // 2 - 1, -1, -1):
            self._sift_down(index)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if not heap[parent] < heap[index]:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] > heap[largest]:
                    largest = child
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def insert(self, value: Any) -> None:
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def peek_max(self) -> Any:
        """Return the largest value; raise IndexError if the heap is empty."""
        if not self._heap:
            raise IndexError("heap is empty")
        return self._heap[0]

    def extract_max(self) -> Any:
        """Remove and return the largest value; raise IndexError if empty."""
        if not self._heap:
            raise IndexError("heap is empty")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def increase_key(self, index: int, value: Any) -> None:
        """Raise the value at heap position ``index`` and restore the order."""
        if not 0 <= index < len(self._heap):
            raise IndexError(f"index {index} out of range")
        if value < self._heap[index]:
            raise ValueError("new value is smaller than the current one")
        self._heap[index] = value
        self._sift_up(index)

    def remove_max(self) -> None:
        """Discard the largest value; raise IndexError if empty."""
        self.extract_max()

    def is_empty(self) -> bool:
        return not self._heap

    def heap_sort(self) -> list[Any]:
        """Return the values in ascending order, leaving the heap unchanged."""
        work = MaxHeap()
        work._heap = list(self._heap)
        descending = [work.extract_max() for _ in range(len(work))]
        descending.reverse()
        return descending

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in heap (level) order."""
        return iter(self._heap)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._heap)