"""First-in, first-out queues: a linear array, a ring buffer and a linked chain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


class QueueEmptyError(IndexError):
    """Raised when reading from or removing from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


def _checked_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be positive")
    return capacity


def _render(values: Iterable[Any]) -> str:
    return " ".join(map(str, values))


class ArrayQueue:
    """Queue over a fixed array whose slots are not reused until cleared.

    The rear only moves forward, so once ``capacity`` values have been
    enqueued the queue reports full even if some were dequeued since.
    """

    def __init__(self, capacity: int = 5) -> None:
        self._capacity = _checked_capacity(capacity)
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        if len(self._slots) == self._capacity:
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        value = self.peek()
        self._front += 1
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return len(self) == 0

    def clear(self) -> None:
        """Empty the queue and make every slot available again."""
        self._slots.clear()
        self._front = 0

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __str__(self) -> str:
        return _render(self)


class CircularQueue:
    """Queue over a fixed ring buffer that wraps around its end."""

    def __init__(self, capacity: int = 5) -> None:
        self._slots: list[Any] = [None] * _checked_capacity(capacity)
        self._front = 0
        self._count = 0

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def _slot(self, offset: int) -> int:
        return (self._front + offset) % len(self._slots)

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[self._slot(self._count)] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        value = self.peek()
        self._slots[self._front] = None
        self._count -= 1
        self._front = self._slot(1) if self._count else 0
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def clear(self) -> None:
        self._slots = [None] * len(self._slots)
        self._front = 0
        self._count = 0

    def __iter__(self) -> Iterator[Any]:
        return (self._slots[self._slot(offset)] for offset in range(self._count))

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return _render(self)


@dataclass
class _Link:
    value: Any
    following: Optional[_Link] = None


class LinkedQueue:
    """Unbounded queue over a singly linked chain with front and rear references."""

    def __init__(self) -> None:
        self._front: Optional[_Link] = None
        self._rear: Optional[_Link] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, value: Any) -> None:
        link = _Link(value)
        if self._rear is None:
            self._front = link
        else:
            self._rear.following = link
        self._rear = link
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        value = self.peek()
        self._front = self._front.following
        if self._front is None:
            self._rear = None
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.value

    def clear(self) -> None:
        self._front = None
        self._rear = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        link = self._front
        while link is not None:
            yield link.value
            link = link.following

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return _render(self)