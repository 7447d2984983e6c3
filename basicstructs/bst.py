"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from typing import Any, Iterator, Optional

_LEFT, _RIGHT = 0, 1


class _TreeNode:
    __slots__ = ("value", "children")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.children: list[Optional[_TreeNode]] = [None, None]


def _side(value: Any, node: _TreeNode) -> int:
    """Values equal to a node's value belong to its left."""
    return _LEFT if value <= node.value else _RIGHT


class BinarySearchTree:
    """Binary search tree in which values equal to a node go to its left."""

    def __init__(self) -> None:
        self._root: Optional[_TreeNode] = None
        self._size = 0

    def add(self, value: Any) -> None:
        """Insert a value by walking down the tree iteratively."""
        node = _TreeNode(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            side = _side(value, current)
            child = current.children[side]
            if child is None:
                current.children[side] = node
                return
            current = child

    def add_recursive(self, value: Any) -> None:
        """Insert a value by descending the tree recursively."""
        self._size += 1
        if self._root is None:
            self._root = _TreeNode(value)
        else:
            self._add_below(self._root, value)

    def _add_below(self, node: _TreeNode, value: Any) -> None:
        side = _side(value, node)
        child = node.children[side]
        if child is None:
            node.children[side] = _TreeNode(value)
        else:
            self._add_below(child, value)

    def _extreme(self, side: int) -> Any:
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while (child := node.children[side]) is not None:
            node = child
        return node.value

    def max(self) -> Any:
        """Return the largest value; raise ValueError if the tree is empty."""
        return self._extreme(_RIGHT)

    def min(self) -> Any:
        """Return the smallest value; raise ValueError if the tree is empty."""
        return self._extreme(_LEFT)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending (in-order) order."""
        pending: list[_TreeNode] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.children[_LEFT]
            node = pending.pop()
            yield node.value
            node = node.children[_RIGHT]

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.children[_side(value, node)]
        return False