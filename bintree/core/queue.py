"""Work Queue
---

A small FIFO used as the work list for breadth-first scans of a tree. Items
are offered at the tail and polled from the head.
"""
from collections import deque
from typing import Deque, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class WorkQueue(Generic[T]):
    """First-in first-out queue of pending work items."""

    _items: Deque[T]

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items = deque(items) if items is not None else deque()

    def offer(self, item: T) -> "WorkQueue[T]":
        """Add an item to the tail of the queue"""
        self._items.append(item)
        return self

    def poll(self) -> T:
        """Remove and return the item at the head of the queue.

        Raises an `IndexError` if the queue is empty."""
        if not self._items:
            raise IndexError("WorkQueue.poll: the queue is empty")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the head item without removing it"""
        if not self._items:
            raise IndexError("WorkQueue.peek: the queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"WorkQueue({list(self._items)!r})"
