"""Fixed-capacity circular queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class EmptyQueueError(IndexError):
    """Raised when reading from an empty queue."""

    def __init__(self) -> None:
        super().__init__("queue is empty")


class FullQueueError(OverflowError):
    """Raised when adding to a full queue."""

    def __init__(self) -> None:
        super().__init__("queue is full")


class CircularQueue:
    """FIFO queue stored in a ring buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield items from front to rear."""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise FullQueueError()
        rear = (self._front + self._size) % self.capacity
        self._slots[rear] = value
        self._size += 1

    def dequeue(self) -> Any:
        if self.is_empty():
            raise EmptyQueueError()
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % self.capacity
        return value

    def display(self) -> str:
        """Return the items front to rear, each followed by '; '."""
        if self.is_empty():
            raise EmptyQueueError()
        return "".join(f"{value}; " for value in self)