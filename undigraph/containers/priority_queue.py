"""
Binary min-heap priority queue.

Thin wrapper over ``heapq`` that tolerates duplicate and stale entries:
the queue never deduplicates, so callers implementing lazy deletion
(e.g. Dijkstra) discard superseded entries themselves when they pop them.
"""

import heapq
import itertools
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class MinPriorityQueue(Generic[T]):
    """
    Min-priority queue backed by a binary heap.

    Items are ordered by their own ``<`` comparison, or by ``key(item)`` when
    a key function is given. The key is evaluated once, at insertion time, so
    mutating an item after inserting it does not disturb the heap. Entries
    with equal keys fall back to insertion order, so keyed items never have
    to be comparable themselves.

    Attributes:
        key: Optional function mapping an item to its priority.

    Complexity:
        - insert: O(log n)
        - remove_min: O(log n)
        - peek_min, is_empty: O(1)

    Example:
        >>> pq = MinPriorityQueue()
        >>> for x in (3, 1, 2):
        ...     pq.insert(x)
        >>> pq.remove_min()
        1
    """

    def __init__(self, key: Optional[Callable[[T], Any]] = None):
        self.key = key
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter: Iterator[int] = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Return True if the queue holds no entries."""
        return not self._heap

    def insert(self, item: T) -> None:
        """
        Add ``item`` to the queue.

        Args:
            item: Comparable item, or any item when the queue has a key.
        """
        priority = item if self.key is None else self.key(item)
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def peek_min(self) -> T:
        """
        Return an item with minimal priority without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("peek_min from an empty priority queue")
        return self._heap[0][2]

    def remove_min(self) -> T:
        """
        Remove and return an item with minimal priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("remove_min from an empty priority queue")
        return heapq.heappop(self._heap)[2]
