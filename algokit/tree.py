"""Binary tree nodes and helpers for building them from level-order lists."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node compared by identity."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def __str__(self) -> str:
        return str(tree_to_list(self))


def create_tree(values: Sequence[Any]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where ``None`` marks a missing node."""
    nodes = [None if value is None else TreeNode(value) for value in values]
    if not nodes:
        raise ValueError("cannot build a tree from an empty sequence")
    kids = iter(nodes[1:])
    for node in nodes:
        if node is None:
            continue
        node.left = next(kids, None)
        node.right = next(kids, None)
    return nodes[0]


def create_tree_in_order(values: Sequence[Any]) -> Optional[TreeNode]:
    """Build a balanced tree whose in-order traversal yields ``values``."""

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = (start + end) // 2
        if values[mid] is None:
            return None
        root = TreeNode(values[mid])
        root.left = build(start, mid - 1)
        root.right = build(mid + 1, end)
        return root

    return build(0, len(values) - 1)


def tree_to_list(root: Optional[TreeNode]) -> list[Any]:
    """Return the level-order list of a tree, without trailing ``None`` entries."""
    if root is None:
        return []
    result: list[Any] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
        else:
            result.append(node.val)
            queue.extend((node.left, node.right))
    while result and result[-1] is None:
        result.pop()
    return result


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def tree_height(root: Optional[TreeNode]) -> int:
    """Return the length of the leftmost path, the height of a complete tree."""
    height = 0
    while root is not None:
        height += 1
        root = root.left
    return height