"""Binary tree problems: traversals, counting, validation, searching and editing."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Iterator, Optional, Sequence

from algokit.tree import TreeNode, tree_height


@dataclass(eq=False, repr=False)
class LinkedTreeNode(TreeNode):
    """A binary tree node that also points at its right neighbour on the same level."""

    next: Optional[LinkedTreeNode] = None


def create_linked_tree(values: Sequence[Any]) -> Optional[LinkedTreeNode]:
    """Build a linked tree from a level-order list where ``None`` marks a missing node."""
    nodes = [None if value is None else LinkedTreeNode(value) for value in values]
    if not nodes:
        raise ValueError("cannot build a tree from an empty sequence")
    kids = iter(nodes[1:])
    for node in nodes:
        if node is None:
            continue
        node.left = next(kids, None)
        node.right = next(kids, None)
    return nodes[0]


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [] if root is None else [root]
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> list[list[Any]]:
    """Return the values level by level, each level left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def right_side_view_dfs(root: Optional[TreeNode]) -> list[Any]:
    """Return the rightmost value of each level, found depth first."""
    view: list[Any] = []

    def walk(node: Optional[TreeNode], depth: int) -> None:
        if node is None:
            return
        if depth == len(view):
            view.append(node.val)
        walk(node.right, depth + 1)
        walk(node.left, depth + 1)

    walk(root, 0)
    return view


def right_side_view_bfs(root: Optional[TreeNode]) -> list[Any]:
    """Return the rightmost value of each level, found level by level."""
    return [level[-1].val for level in _levels(root)]


def _node_exists(root: TreeNode, index: int, height: int) -> bool:
    low, high = 0, 2 ** (height - 1) - 1
    node: Optional[TreeNode] = root
    for _ in range(height - 1):
        if node is None:
            return False
        middle = (low + high + 1) // 2
        if index >= middle:
            node = node.right
            low = middle
        else:
            node = node.left
            high = middle - 1
    return node is not None


def count_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete tree by binary search over its last level."""
    height = tree_height(root)
    if height == 0:
        return 0
    low, high = 0, 2 ** (height - 1) - 1
    while low < high:
        middle = (low + high + 1) // 2
        if _node_exists(root, middle, height):
            low = middle
        else:
            high = middle - 1
    return 2 ** (height - 1) - 1 + low + 1


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether every left subtree is strictly smaller and every right one strictly larger."""

    def check(node: Optional[TreeNode], low: Any, high: Any) -> bool:
        if node is None:
            return True
        if (high is not None and node.val >= high) or (
            low is not None and node.val <= low
        ):
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, None, None)


def connect(root: Optional[LinkedTreeNode]) -> Optional[LinkedTreeNode]:
    """Point each node of a perfect tree at its right neighbour, in place."""
    leftmost = root
    while leftmost is not None and leftmost.left is not None:
        node: Optional[LinkedTreeNode] = leftmost
        while node is not None:
            if node.left is None or node.right is None:
                raise ValueError("tree is not perfect")
            node.left.next = node.right
            if node.next is not None:
                node.right.next = node.next.left
            node = node.next
        leftmost = leftmost.left
    return root


def max_level_sum(root: Optional[TreeNode]) -> int:
    """Return the 1-based level with the largest sum; the first such level on ties."""
    if root is None:
        raise ValueError("tree is empty")
    best_level, best_sum = 0, float("-inf")
    for level_number, level in enumerate(_levels(root), start=1):
        total = sum(node.val for node in level)
        if total > best_sum:
            best_level, best_sum = level_number, total
    return best_level


def longest_zigzag(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path that alternates left and right."""
    if root is None:
        return 0

    def walk(node: Optional[TreeNode], length: int, came_from_left: bool) -> int:
        if node is None:
            return length
        length += 1
        if came_from_left:
            left_length, right_length = 0, length
        else:
            left_length, right_length = length, 0
        return max(
            walk(node.left, left_length, True), walk(node.right, right_length, False)
        )

    return max(walk(root.left, 0, True), walk(root.right, 0, False))


def good_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes not smaller than any node on the path from the root."""

    def walk(node: Optional[TreeNode], path_max: Any) -> int:
        if node is None:
            return 0
        good = node.val >= path_max
        if good:
            path_max = node.val
        return int(good) + walk(node.left, path_max) + walk(node.right, path_max)

    return walk(root, float("-inf"))


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node that has both ``p`` and ``q`` below or at it."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def path_sum(root: Optional[TreeNode], target_sum: int) -> int:
    """Count the downward paths whose values add up to ``target_sum``."""
    prefix_counts: Counter[int] = Counter({0: 1})

    def walk(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        found = prefix_counts[running - target_sum]
        prefix_counts[running] += 1
        found += walk(node.left, running) + walk(node.right, running)
        prefix_counts[running] -= 1
        return found

    return walk(root, 0)


def delete_node(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Remove ``key`` from a binary search tree and return the new root."""
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
    elif key > root.val:
        root.right = delete_node(root.right, key)
    elif root.left is None and root.right is None:
        return None
    elif root.right is None:
        return root.left
    elif root.left is None:
        return root.right
    else:
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def search_bst(root: Optional[TreeNode], val: Any) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a binary search tree, or ``None``."""
    while root is not None and root.val != val:
        root = root.right if root.val < val else root.left
    return root


def search_bst_recursive(root: Optional[TreeNode], val: Any) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a binary search tree, searching recursively."""
    if root is None or root.val == val:
        return root
    if root.val < val:
        return search_bst_recursive(root.right, val)
    return search_bst_recursive(root.left, val)


def _leaves(root: Optional[TreeNode]) -> Iterator[Any]:
    if root is None:
        return
    if root.left is None and root.right is None:
        yield root.val
        return
    yield from _leaves(root.left)
    yield from _leaves(root.right)


def leaf_similar(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """Tell whether both trees have the same leaf values from left to right."""
    missing = object()
    return all(
        a == b
        for a, b in zip_longest(_leaves(first), _leaves(second), fillvalue=missing)
    )