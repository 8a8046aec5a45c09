"""Red-black tree keeping values ordered by a key, with stable ties."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "key", "left", "right", "parent", "red")

    def __init__(self, value: Any = None, key: Any = None, red: bool = False) -> None:
        self.value = value
        self.key = key
        self.red = red
        self.left: _Node = self
        self.right: _Node = self
        self.parent: _Node = self


class RbTree:
    """Ordered multiset of values; equal keys keep insertion order.

    Values are identified by object identity, so the same object can be in
    the tree only once and is erased by passing it back.
    """

    def __init__(self, key: Callable[[Any], Any] | None = None) -> None:
        self._key = key if key is not None else (lambda value: value)
        self._nil = _Node()
        self._root = self._nil
        self._nodes: dict[int, _Node] = {}

    def insert(self, value: Any) -> None:
        """Add ``value`` after any values with an equal key."""
        if id(value) in self._nodes:
            raise ValueError("value is already in the tree")
        nil = self._nil
        key = self._key(value)
        node = _Node(value, key, red=True)
        node.left = node.right = nil

        parent = nil
        current = self._root
        while current is not nil:
            parent = current
            current = current.left if key < current.key else current.right

        node.parent = parent
        if parent is nil:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._nodes[id(value)] = node
        self._insert_fixup(node)

    def erase(self, value: Any) -> None:
        """Remove ``value``; raise ``ValueError`` if it is not in the tree."""
        node = self._nodes.pop(id(value), None)
        if node is None:
            raise ValueError("value is not in the tree")
        nil = self._nil
        moved = node
        moved_red = moved.red
        if node.left is nil:
            child = node.right
            self._transplant(node, node.right)
        elif node.right is nil:
            child = node.left
            self._transplant(node, node.left)
        else:
            moved = self._minimum(node.right)
            moved_red = moved.red
            child = moved.right
            if moved.parent is node:
                child.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = node.right
                moved.right.parent = moved
            self._transplant(node, moved)
            moved.left = node.left
            moved.left.parent = moved
            moved.red = node.red
        if not moved_red:
            self._erase_fixup(child)
        nil.parent = nil
        nil.red = False

    def front(self) -> Any:
        """Return the value with the smallest key."""
        if self._root is self._nil:
            raise IndexError("front() on an empty tree")
        return self._minimum(self._root).value

    def back(self) -> Any:
        """Return the value with the largest key."""
        if self._root is self._nil:
            raise IndexError("back() on an empty tree")
        node = self._root
        while node.right is not self._nil:
            node = node.right
        return node.value

    def __iter__(self) -> Iterator[Any]:
        nil = self._nil
        stack: list[_Node] = []
        node = self._root
        while stack or node is not nil:
            while node is not nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return self._root is not self._nil

    def _minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _rotate_left(self, node: _Node) -> None:
        nil = self._nil
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not nil:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is nil:
            self._root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node) -> None:
        nil = self._nil
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not nil:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is nil:
            self._root = pivot
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot
        pivot.right = node
        node.parent = pivot

    def _transplant(self, old: _Node, new: _Node) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def _insert_fixup(self, node: _Node) -> None:
        while node.parent.red:
            grand = node.parent.parent
            if node.parent is grand.left:
                uncle = grand.right
                if uncle.red:
                    node.parent.red = False
                    uncle.red = False
                    grand.red = True
                    node = grand
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self._rotate_left(node)
                    node.parent.red = False
                    node.parent.parent.red = True
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grand.left
                if uncle.red:
                    node.parent.red = False
                    uncle.red = False
                    grand.red = True
                    node = grand
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._rotate_right(node)
                    node.parent.red = False
                    node.parent.parent.red = True
                    self._rotate_left(node.parent.parent)
        self._root.red = False

    def _erase_fixup(self, node: _Node) -> None:
        while node is not self._root and not node.red:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    sibling = parent.right
                if not sibling.left.red and not sibling.right.red:
                    sibling.red = True
                    node = parent
                else:
                    if not sibling.right.red:
                        sibling.left.red = False
                        sibling.red = True
                        self._rotate_right(sibling)
                        sibling = parent.right
                    sibling.red = parent.red
                    parent.red = False
                    sibling.right.red = False
                    self._rotate_left(parent)
                    node = self._root
            else:
                sibling = parent.left
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    sibling = parent.left
                if not sibling.left.red and not sibling.right.red:
                    sibling.red = True
                    node = parent
                else:
                    if not sibling.left.red:
                        sibling.right.red = False
                        sibling.red = True
                        self._rotate_left(sibling)
                        sibling = parent.left
                    sibling.red = parent.red
                    parent.red = False
                    sibling.left.red = False
                    self._rotate_right(parent)
                    node = self._root
        node.red = False