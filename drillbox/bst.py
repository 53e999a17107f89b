"""Binary search tree of unique, ordered values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class EmptyTreeError(LookupError):
    """Raised when an operation needs a non-empty tree."""

    def __init__(self) -> None:
        super().__init__("tree is empty")


class DuplicateValueError(ValueError):
    """Raised when a value already present in the tree is inserted again."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"value already in tree: {value!r}")
        self.value = value


@dataclass
class Node:
    """A tree node holding one value and links to its children."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def format_tree(node: Node | None, level: int = 0) -> str:
    """Render a subtree sideways: right branch on top, four spaces per level."""
    if node is None:
        return ""
    return (
        format_tree(node.right, level + 1)
        + "    " * level
        + f"{node.data}\n"
        + format_tree(node.left, level + 1)
    )


class BinarySearchTree:
    """Unbalanced binary search tree that rejects duplicate values."""

    def __init__(self) -> None:
        self.root: Node | None = None
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, value: Any) -> None:
        """Insert a value; raise DuplicateValueError if it is already present."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            self._len += 1
            return
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = new_node
                    break
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = new_node
                    break
                node = node.right
            else:
                raise DuplicateValueError(value)
        self._len += 1

    def remove(self, value: Any) -> bool:
        """Remove a value; return whether it was found. Raise on an empty tree."""
        if self.is_empty():
            raise EmptyTreeError()
        self.root, found = self._remove(self.root, value)
        if found:
            self._len -= 1
        return found

    @classmethod
    def _remove(cls, node: Node | None, value: Any) -> tuple[Node | None, bool]:
        if node is None:
            return None, False
        if value < node.data:
            node.left, found = cls._remove(node.left, value)
            return node, found
        if value > node.data:
            node.right, found = cls._remove(node.right, value)
            return node, found
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        # Two children: take the largest value of the left subtree.
        predecessor = node.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        node.data = predecessor.data
        node.left, _ = cls._remove(node.left, predecessor.data)
        return node, True

    def search(self, value: Any) -> Node | None:
        """Return the node holding value, or None."""
        node = self.root
        while node is not None:
            if value < node.data:
                node = node.left
            elif value > node.data:
                node = node.right
            else:
                return node
        return None

    def pre_order(self) -> list[Any]:
        return list(self._pre(self.root))

    def in_order(self) -> list[Any]:
        return list(self._in(self.root))

    def post_order(self) -> list[Any]:
        return list(self._post(self.root))

    @classmethod
    def _pre(cls, node: Node | None) -> Iterator[Any]:
        if node is not None:
            yield node.data
            yield from cls._pre(node.left)
            yield from cls._pre(node.right)

    @classmethod
    def _in(cls, node: Node | None) -> Iterator[Any]:
        if node is not None:
            yield from cls._in(node.left)
            yield node.data
            yield from cls._in(node.right)

    @classmethod
    def _post(cls, node: Node | None) -> Iterator[Any]:
        if node is not None:
            yield from cls._post(node.left)
            yield from cls._post(node.right)
            yield node.data

    def clear(self) -> None:
        """Drop every node."""
        self.root = None
        self._len = 0

    def render(self) -> str:
        return format_tree(self.root, 0)