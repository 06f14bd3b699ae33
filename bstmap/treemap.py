"""An ordered map backed by an unbalanced binary search tree.

Keys are ordered by a user-supplied ``lower_than(key1, key2)`` predicate.
Two keys are equal when neither is lower than the other. The map keeps a
``current`` cursor that searches, insertions and traversals move.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

LowerThan = Callable[[Any, Any], Any]


@dataclass
class Pair:
    """A key together with its value."""

    key: Any
    value: Any


@dataclass(eq=False)
class TreeNode:
    """A node of the search tree."""

    pair: Pair
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)
    parent: Optional["TreeNode"] = field(default=None, repr=False)

    @classmethod
    def create(cls, key: Any, value: Any) -> "TreeNode":
        """Build a detached node holding ``key`` and ``value``."""
        return cls(Pair(key, value))


def minimum(node: TreeNode) -> TreeNode:
    """Return the leftmost node of the subtree rooted at ``node``."""
    while node.left is not None:
        node = node.left
    return node


class TreeMap:
    """Ordered map with a traversal cursor."""

    def __init__(self, lower_than: LowerThan) -> None:
        self.root: Optional[TreeNode] = None
        self.current: Optional[TreeNode] = None
        self.lower_than = lower_than

    def _lt(self, key1: Any, key2: Any) -> bool:
        return bool(self.lower_than(key1, key2))

    def is_equal(self, key1: Any, key2: Any) -> bool:
        """Return True when neither key is lower than the other."""
        return not self._lt(key1, key2) and not self._lt(key2, key1)

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``; an existing key is left untouched."""
        new = TreeNode.create(key, value)
        if self.root is None:
            self.root = new
            self.current = new
            return
        if self.search(key) is not None:
            return
        # The failed search leaves the cursor on the node the key hangs from.
        parent = self.current
        assert parent is not None
        if self._lt(key, parent.pair.key):
            parent.left = new
        else:
            parent.right = new
        new.parent = parent
        self.current = new

    def _replace(self, node: TreeNode, child: Optional[TreeNode]) -> None:
        parent = node.parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        if self.current is node:
            self.current = None

    def remove_node(self, node: TreeNode) -> None:
        """Unlink ``node`` from the tree, keeping the order of the rest."""
        if node.left is not None and node.right is not None:
            successor = minimum(node.right)
            node.pair = successor.pair
            node = successor
        child = node.left if node.left is not None else node.right
        self._replace(node, child)

    def erase(self, key: Any) -> None:
        """Remove the entry for ``key`` if there is one."""
        if self.root is None:
            return
        if self.search(key) is None:
            return
        assert self.current is not None
        self.remove_node(self.current)

    def search(self, key: Any) -> Optional[Pair]:
        """Return the pair for ``key``, or None.

        The cursor is left on the found node, or on the last node visited.
        """
        node = self.root
        self.current = node
        while node is not None:
            if self.is_equal(node.pair.key, key):
                return node.pair
            nxt = node.left if self._lt(key, node.pair.key) else node.right
            if nxt is None:
                return None
            node = nxt
            self.current = node
        return None

    def upper_bound(self, key: Any) -> Optional[Pair]:
        """Return the pair with the smallest key not lower than ``key``, or None."""
        node = self.root
        bound: Optional[TreeNode] = None
        while node is not None:
            if self.is_equal(key, node.pair.key):
                self.current = node
                return node.pair
            if self._lt(key, node.pair.key):
                bound = node
                node = node.left
            else:
                node = node.right
        if bound is None:
            return None
        self.current = bound
        return bound.pair

    def first(self) -> Optional[Pair]:
        """Move the cursor to the smallest key and return its pair."""
        if self.root is None:
            self.current = None
            return None
        self.current = minimum(self.root)
        return self.current.pair

    def next(self) -> Optional[Pair]:
        """Move the cursor to the in-order successor and return its pair."""
        node = self.current
        if node is None:
            return None
        if node.right is not None:
            self.current = minimum(node.right)
            return self.current.pair
        parent = node.parent
        while parent is not None and node is parent.right:
            node = parent
            parent = parent.parent
        self.current = parent
        return parent.pair if parent is not None else None

    def __iter__(self) -> Iterator[Pair]:
        pair = self.first()
        while pair is not None:
            yield pair
            pair = self.next()