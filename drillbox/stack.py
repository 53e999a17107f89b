"""Fixed-capacity stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class EmptyStackError(IndexError):
    """Raised when reading from an empty stack."""

    def __init__(self) -> None:
        super().__init__("stack is empty")


class FullStackError(OverflowError):
    """Raised when pushing onto a full stack."""

    def __init__(self) -> None:
        super().__init__("stack is full")


class Stack:
    """LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield items from top to bottom."""
        return reversed(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, value: Any) -> None:
        if self.is_full():
            raise FullStackError()
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise EmptyStackError()
        return self._items.pop()

    def top(self) -> Any:
        if self.is_empty():
            raise EmptyStackError()
        return self._items[-1]

    def display(self) -> str:
        """Return the items top to bottom, each followed by '; '."""
        if self.is_empty():
            raise EmptyStackError()
        return "".join(f"{value}; " for value in self)