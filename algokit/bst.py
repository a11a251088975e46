"""A binary search tree that sends equal values to the right."""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional

_JSON_INDENT = "|  "


class NodeNotFoundError(LookupError):
    """Raised when a value is not in the tree."""


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree, compared by identity."""

    value: int
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None

    def insert(self, value: int) -> None:
        """Insert ``value`` below this node; values not below it go right."""
        node = self
        while True:
            if node.value <= value:
                if node.right is None:
                    node.right = BSTNode(value)
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = BSTNode(value)
                    return
                node = node.left

    def lookup(
        self, value: int, parent: Optional[BSTNode] = None
    ) -> tuple[BSTNode, Optional[BSTNode]]:
        """Return the node holding ``value`` and its parent.

        ``parent`` is the parent of this node and is returned when this node
        holds the value itself.
        """
        node, parent_node = self, parent
        while node.value != value:
            child = node.right if node.value <= value else node.left
            if child is None:
                raise NodeNotFoundError(f"node {value} not found")
            node, parent_node = child, node
        return node, parent_node

    def _as_dict(self) -> dict[str, Any]:
        return {
            "Value": self.value,
            "Left": None if self.left is None else self.left._as_dict(),
            "Right": None if self.right is None else self.right._as_dict(),
        }

    def to_json(self) -> str:
        """Return the subtree as indented JSON."""
        return json.dumps(self._as_dict(), indent=_JSON_INDENT)


class BinarySearchTree:
    """A binary search tree of integers."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def insert(self, value: int) -> None:
        """Insert ``value`` into the tree."""
        if self.root is None:
            self.root = BSTNode(value)
        else:
            self.root.insert(value)

    def lookup(self, value: int) -> tuple[BSTNode, Optional[BSTNode]]:
        """Return the node holding ``value`` and its parent, ``None`` for the root."""
        if self.root is None:
            raise NodeNotFoundError("tree has no root")
        return self.root.lookup(value, None)

    def remove(self, value: int) -> tuple[BSTNode, Optional[BSTNode]]:
        """Unlink the node holding ``value`` and return it with its former parent.

        Removing the root empties the tree. A node with a right subtree is
        replaced by the leftmost node of that subtree.
        """
        node, parent = self.lookup(value)
        if parent is None:
            self.root = None
            return node, parent
        if node.left is None and node.right is None:
            replacement = None
        elif node.right is None:
            replacement = node.left
        else:
            replacement = node.right
            while replacement.left is not None:
                replacement = replacement.left
        if parent.right is node:
            parent.right = replacement
        if parent.left is node:
            parent.left = replacement
        return node, parent

    def to_json(self) -> str:
        """Return the whole tree as indented JSON."""
        root = None if self.root is None else self.root._as_dict()
        return json.dumps({"Root": root}, indent=_JSON_INDENT)

    def bfs(self) -> list[int]:
        """Return the values level by level, left to right."""
        if self.root is None:
            return []
        values: list[int] = []
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            queue.extend(child for child in (node.left, node.right) if child)
            values.append(node.value)
        return values

    def bfs_recursive(self) -> list[int]:
        """Return the values level by level, walking the queue recursively."""
        if self.root is None:
            return []

        def walk(queue: deque[BSTNode], values: list[int]) -> list[int]:
            if not queue:
                return values
            node = queue.popleft()
            queue.extend(child for child in (node.left, node.right) if child)
            values.append(node.value)
            return walk(queue, values)

        return walk(deque([self.root]), [])

    def in_order(self) -> list[int]:
        """Return the values in sorted (left, node, right) order."""
        return list(_in_order(self.root))

    def pre_order(self) -> list[int]:
        """Return the values in node, left, right order."""
        return list(_pre_order(self.root))

    def post_order(self) -> list[int]:
        """Return the values in left, right, node order."""
        return list(_post_order(self.root))


def _in_order(node: Optional[BSTNode]) -> Iterator[int]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.value
        yield from _in_order(node.right)


def _pre_order(node: Optional[BSTNode]) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _pre_order(node.left)
        yield from _pre_order(node.right)


def _post_order(node: Optional[BSTNode]) -> Iterator[int]:
    if node is not None:
        yield from _post_order(node.left)
        yield from _post_order(node.right)
        yield node.value