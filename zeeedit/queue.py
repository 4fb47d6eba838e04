"""A bounded first-in first-out queue shared between a producer and a consumer thread."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class BoundedQueue(Generic[T]):
    """FIFO holding at most ``size - 1`` items; pushing to a full queue fails."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"queue size must be positive, got {size}")
        self._capacity = size - 1
        self._items: deque[T] = deque()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def push(self, item: T) -> bool:
        """Append ``item``; return False when the queue is full."""
        with self._lock:
            if len(self._items) >= self._capacity:
                return False
            self._items.append(item)
            return True

    def pop_all(self, reader: Callable[[T], object]) -> int:
        """Hand every queued item to ``reader`` in order; return how many were read."""
        count = 0
        while True:
            with self._lock:
                if not self._items:
                    return count
                item = self._items.popleft()
            reader(item)
            count += 1