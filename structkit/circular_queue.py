"""Bounded circular first-in, first-out queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from structkit.linear_queue import QueueEmptyError, QueueFullError
from structkit.stack import DEFAULT_CAPACITY, _validate_capacity


class CircularQueue:
    """A ring buffer whose slots are reused as soon as items are dequeued."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _validate_capacity(capacity)
        self._slots: list[Any] = [None] * self.capacity
        self._start = 0
        self._count = 0

    def _at(self, offset: int) -> Any:
        return self._slots[(self._start + offset) % self.capacity]

    def _require_items(self) -> None:
        if not self._count:
            raise QueueEmptyError("queue is empty")

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[(self._start + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        self._require_items()
        value = self._slots[self._start]
        self._slots[self._start] = None
        self._start = (self._start + 1) % self.capacity
        self._count -= 1
        return value

    def front(self) -> Any:
        """The value at the front."""
        self._require_items()
        return self._at(0)

    def rear(self) -> Any:
        """The value at the rear."""
        self._require_items()
        return self._at(self._count - 1)

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        return (self._at(offset) for offset in range(self._count))

    def __len__(self) -> int:
        return self._count