# basicstructs

Plain, dependency-free implementations of classic data structures. They are
meant for integers but work with any values that can be compared.

| Module | Classes |
| --- | --- |
| `basicstructs.bst` | `BinarySearchTree` |
| `basicstructs.array_list` | `ArrayList` (fixed capacity) |
| `basicstructs.linked_list` | `LinkedList` |
| `basicstructs.max_heap` | `MaxHeap` |
| `basicstructs.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueEmptyError`, `QueueFullError` |
| `basicstructs.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |

## Installation

```
pip install .
```

## Examples

Binary search tree (values equal to a node go to its left; iteration is in-order):

```python
from basicstructs.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (10, 5, 15, 3, 7):
    tree.add(value)
tree.add_recursive(15)
print(tree.max(), tree.min())   # 15 3
print(list(tree))               # [3, 5, 7, 10, 15, 15]
print(7 in tree, len(tree))     # True 6
```

Linked list:

```python
from basicstructs.linked_list import LinkedList

items = LinkedList([20])
items.push_front(10)
items.push_back(30)
items.reverse()
print(items)                    # 30 20 10
```

Max-heap:

```python
from basicstructs.max_heap import MaxHeap

heap = MaxHeap([10, 30, 20, 5, 40])
print(heap.peek_max())          # 40
heap.remove_max()
print(heap.heap_sort())         # [5, 10, 20, 30]
```

`heap_sort` returns a new ascending list and leaves the heap as it was.

Queues and stacks raise exceptions instead of printing warnings:

```python
from basicstructs.queues import CircularQueue, QueueFullError
from basicstructs.stacks import LinkedStack, StackUnderflowError

queue = CircularQueue(5)
for value in (10, 20, 30, 40, 50):
    queue.enqueue(value)
try:
    queue.enqueue(60)
except QueueFullError:
    print("queue is full")

stack = LinkedStack()
stack.push(20)
print(stack.pop())              # 20
try:
    stack.pop()
except StackUnderflowError:
    print("stack underflow")
```

## Errors and limits

- `BinarySearchTree.max`/`min` and `LinkedList.max`/`min` raise `ValueError`
  when empty; `LinkedList.pop_front`, `pop_back`, `at`, `insert` and `delete`
  raise `IndexError` on an empty list or an index out of range.
- `ArrayList` raises `OverflowError` when full and `IndexError` for an index
  out of range. `insert_at` only inserts before an existing item; use `append`
  to add at the end. `index_of` and `remove` raise `ValueError` for a missing
  element.
- `MaxHeap.peek_max`, `extract_max` and `remove_max` raise `IndexError` when
  empty; `increase_key` raises `ValueError` if the new value is smaller.
- `QueueEmptyError` is an `IndexError`, `QueueFullError` an `OverflowError`.
  `ArrayQueue` (default capacity 5) never reuses a slot until `clear()` is
  called, so it reports full after `capacity` enqueues even if some values were
  dequeued. `CircularQueue` (default capacity 5) wraps around; `LinkedQueue`
  is unbounded.
- `StackOverflowError` is an `OverflowError`, `StackUnderflowError` an
  `IndexError`. `ArrayStack` holds at most 20 values by default; `LinkedStack`
  is unbounded. Iterating a stack yields values from top to bottom.

The package is a library only: it has no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```