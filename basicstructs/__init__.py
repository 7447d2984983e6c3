"""Classic data structures: search tree, lists, heap, queues and stacks."""

__version__ = "0.1.0"

__all__ = ["array_list", "bst", "linked_list", "max_heap", "queues", "stacks"]