"""Bounded first-in, first-out queue with linear slot use."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from structkit.stack import DEFAULT_CAPACITY, _validate_capacity


class QueueFullError(OverflowError):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class LinearQueue:
    """A queue whose slots are consumed by each enqueue.

    Dequeuing does not free a slot; the slots are only reclaimed once the
    queue has been drained completely.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _validate_capacity(capacity)
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def _filled(self) -> deque[Any]:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(value)
        self._slots_used += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        value = self._filled().popleft()
        if not self._items:
            self._slots_used = 0
        return value

    def front(self) -> Any:
        """The value at the front."""
        return self._filled()[0]

    def rear(self) -> Any:
        """The value at the rear."""
        return self._filled()[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._slots_used >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)