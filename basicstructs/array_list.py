"""A list with a fixed capacity."""

from __future__ import annotations

from typing import Any, Iterator


class ArrayList:
    """Sequence of at most ``capacity`` items stored contiguously."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The most items the list can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(map(str, self._items)) if self._items else "EMPTY"

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def _check_index(self, index: int) -> None:
        if not self._in_range(index):
            raise IndexError(f"index {index} out of range")

    def _check_room(self) -> None:
        if self.is_full():
            raise OverflowError("list is full")

    def item_equals(self, index: int, element: Any) -> bool:
        """Tell whether the item at ``index`` equals ``element``; False if out of range."""
        return self._in_range(index) and self._items[index] == element

    def insert_at(self, index: int, element: Any) -> None:
        """Insert before an existing item, shifting the rest right."""
        self._check_index(index)
        self._check_room()
        self._items.insert(index, element)

    def append(self, element: Any) -> None:
        """Add an item at the end."""
        self._check_room()
        self._items.append(element)

    def remove_at(self, index: int) -> None:
        """Remove the item at ``index``, shifting the rest left."""
        self._check_index(index)
        del self._items[index]

    def replace_at(self, index: int, element: Any) -> None:
        self._check_index(index)
        self._items[index] = element

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def index_of(self, element: Any) -> int:
        """Return the position of the first equal item; raise ValueError if absent."""
        try:
            return self._items.index(element)
        except ValueError:
            raise ValueError(f"{element!r} is not in the list") from None

    def remove(self, element: Any) -> None:
        """Remove the first equal item; raise ValueError if absent."""
        self.remove_at(self.index_of(element))