"""Last-in, first-out stacks over a fixed array and over a linked chain."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Tuple


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


def _render(values: Iterable[Any]) -> str:
    return " ".join(map(str, values))


class ArrayStack:
    """Stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 20) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) == self._capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return _render(self)


_Chain = Optional[Tuple[Any, Any]]


class LinkedStack:
    """Unbounded stack over a singly linked chain of (value, rest) pairs."""

    def __init__(self) -> None:
        self._top: _Chain = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = (value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        value, self._top = self._top
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        return self._top[0]

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        chain = self._top
        while chain is not None:
            value, chain = chain
            yield value

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return _render(self)