"""Bounded last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 100


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


def _validate_capacity(capacity: int) -> int:
    """Return the capacity, rejecting values below one."""
    if capacity < 1:
        raise ValueError("capacity must be positive")
    return capacity


class Stack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _validate_capacity(capacity)
        self._items: list[Any] = []

    def _filled(self) -> list[Any]:
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        return self._filled().pop()

    def peek(self) -> Any:
        return self._filled()[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Items from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)