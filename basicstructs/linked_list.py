"""A singly linked list with head and tail references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_back(self, element: Any) -> None:
        node = _Node(element)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def push_front(self, element: Any) -> None:
        self._head = _Node(element, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value; raise IndexError if empty."""
        if self._head is None or self._tail is None:
            raise IndexError("pop from empty list")
        value = self._tail.value
        if self._head is self._tail:
            self._head = self._tail = None
        else:
            node = self._head
            while node.next is not self._tail:
                node = node.next  # type: ignore[assignment]
            node.next = None
            self._tail = node
        self._size -= 1
        return value

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def at(self, index: int) -> Any:
        """Return the value at ``index``; raise IndexError if out of range."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        for position, value in enumerate(self):
            if position == index:
                return value
        raise IndexError(f"index {index} out of range")

    def is_empty(self) -> bool:
        return self._size == 0

    def max(self) -> Any:
        if self.is_empty():
            raise ValueError("list is empty")
        return max(self)

    def min(self) -> Any:
        if self.is_empty():
            raise ValueError("list is empty")
        return min(self)

    def index_of(self, element: Any) -> int:
        """Return the position of the first equal value; raise ValueError if absent."""
        for position, value in enumerate(self):
            if value == element:
                return position
        raise ValueError(f"{element!r} is not in the list")

    def push_sorted(self, element: Any) -> None:
        """Insert into an ascending list so that it stays ascending."""
        if self._head is None or element < self._head.value:
            self.push_front(element)
            return
        node = self._head
        while node.next is not None and node.next.value < element:
            node = node.next
        node.next = _Node(element, node.next)
        if node.next.next is None:
            self._tail = node.next
        self._size += 1

    def insert(self, index: int, element: Any) -> None:
        """Insert before position ``index``; ``index == len`` appends."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            self.push_front(element)
            return
        if index == self._size:
            self.push_back(element)
            return
        previous = self._head
        for _ in range(index - 1):
            previous = previous.next  # type: ignore[union-attr]
        previous.next = _Node(element, previous.next)  # type: ignore[union-attr]
        self._size += 1

    def is_sorted(self) -> bool:
        """Tell whether the values are in non-decreasing order."""
        return all(node.next is None or node.value <= node.next.value for node in self._nodes())

    def delete(self, index: int) -> None:
        """Remove the value at ``index``; raise IndexError if out of range."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            self.pop_front()
            return
        if index == self._size - 1:
            self.pop_back()
            return
        previous = self._head
        for _ in range(index - 1):
            previous = previous.next  # type: ignore[union-attr]
        previous.next = previous.next.next  # type: ignore[union-attr]
        self._size -= 1

    def has_cycle(self) -> bool:
        """Detect a loop in the node chain with the two-pointer method."""
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next  # type: ignore[union-attr]
            if fast is slow:
                return True
        return False

    def extend(self, other: Iterable[Any]) -> None:
        """Append every value of ``other`` at the end."""
        for value in list(other):
            self.push_back(value)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_Node] = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous