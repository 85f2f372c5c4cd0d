"""An unbalanced binary search tree ordered solely by the ``<`` operator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    element: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree.

    Items are matched using ``<`` only: two items are equal when neither is
    less than the other. Failed lookups return the ``not_found`` value given
    at construction.
    """

    def __init__(self, not_found: Any) -> None:
        self.not_found = not_found
        self._root: Optional[_Node[T]] = None

    def insert(self, item: T) -> None:
        """Insert ``item``; duplicates are ignored."""
        if self._root is None:
            self._root = _Node(item)
            return
        node = self._root
        while True:
            if item < node.element:
                if node.left is None:
                    node.left = _Node(item)
                    return
                node = node.left
            elif node.element < item:
                if node.right is None:
                    node.right = _Node(item)
                    return
                node = node.right
            else:
                return

    def remove(self, item: T) -> None:
        """Remove ``item``; nothing happens if it is absent."""
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if item < node.element:
                parent, node = node, node.left
            elif node.element < item:
                parent, node = node, node.right
            else:
                break
        if node is None:
            return

        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.element = successor.element
            if successor_parent is node:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def find_min(self) -> Any:
        """Return the smallest item, or ``not_found`` if the tree is empty."""
        node = self._root
        if node is None:
            return self.not_found
        while node.left is not None:
            node = node.left
        return node.element

    def find_max(self) -> Any:
        """Return the largest item, or ``not_found`` if the tree is empty."""
        node = self._root
        if node is None:
            return self.not_found
        while node.right is not None:
            node = node.right
        return node.element

    def find(self, item: T) -> Any:
        """Return the stored item matching ``item``, or ``not_found``."""
        node = self._root
        while node is not None:
            if item < node.element:
                node = node.left
            elif node.element < item:
                node = node.right
            else:
                return node.element
        return self.not_found

    def clear(self) -> None:
        """Remove every item."""
        self._root = None

    def is_empty(self) -> bool:
        return self._root is None

    def __iter__(self) -> Iterator[T]:
        """Yield the items in sorted order."""
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right

    def __copy__(self) -> "BinarySearchTree[T]":
        return self.copy()

    def copy(self) -> "BinarySearchTree[T]":
        """Return a tree with the same shape and items but its own nodes."""
        result: BinarySearchTree[T] = BinarySearchTree(self.not_found)
        if self._root is None:
            return result
        result._root = _Node(self._root.element)
        pending = [(self._root, result._root)]
        while pending:
            source, target = pending.pop()
            if source.left is not None:
                target.left = _Node(source.left.element)
                pending.append((source.left, target.left))
            if source.right is not None:
                target.right = _Node(source.right.element)
                pending.append((source.right, target.right))
        return result

    def write(self, stream: TextIO) -> None:
        """Write each item on its own line, in sorted order."""
        for element in self:
            stream.write(f"{element}\n")