from typing import Iterator, Optional

import pytest

from algokit.tree import TreeNode, create_tree, tree_to_list
from algokit.tree_algorithms import (
    LinkedTreeNode,
    connect,
    count_nodes,
    create_linked_tree,
    delete_node,
    good_nodes,
    is_valid_bst,
    leaf_similar,
    level_order,
    longest_zigzag,
    lowest_common_ancestor,
    max_level_sum,
    path_sum,
    right_side_view_bfs,
    right_side_view_dfs,
    search_bst,
    search_bst_recursive,
)


def _in_order(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.val
        yield from _in_order(node.right)


def test_create_linked_tree_round_trip():
    values = [1, 2, 3, None, 5, None, 4]
    root = create_linked_tree(values)
    assert isinstance(root, LinkedTreeNode)
    assert tree_to_list(root) == values
    assert root.next is None


def test_create_linked_tree_empty_raises():
    with pytest.raises(ValueError):
        create_linked_tree([])


def test_level_order():
    root = create_tree([3, 9, 20, None, None, 15, 7])
    assert level_order(root) == [[3], [9, 20], [15, 7]]
    assert level_order(None) == []


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, None, 5, None, 4], [3, 9, 20, None, None, 15, 7], [1, 2, 3, 4], [1]],
)
def test_right_side_views_agree_with_levels(values):
    root = create_tree(values)
    expected = [level[-1] for level in level_order(root)]
    assert right_side_view_dfs(root) == expected
    assert right_side_view_bfs(root) == expected


def test_right_side_view_example():
    root = create_tree([1, 2, 3, None, 5, None, 4])
    assert right_side_view_dfs(root) == [1, 3, 4]
    assert right_side_view_dfs(None) == []
    assert right_side_view_bfs(None) == []


@pytest.mark.parametrize("n", range(1, 20))
def test_count_nodes_complete_trees(n):
    assert count_nodes(create_tree(list(range(1, n + 1)))) == n


def test_count_nodes_empty():
    assert count_nodes(None) == 0


@pytest.mark.parametrize(
    "values, expected",
    [
        ([2, 1, 3], True),
        ([2, 2, 2], False),
        ([5, 1, 4, None, None, 3, 6], False),
        ([5, 3, 6, 2, 4, None, 7], True),
    ],
)
def test_is_valid_bst(values, expected):
    assert is_valid_bst(create_tree(values)) is expected


def test_connect_perfect_tree():
    root = create_linked_tree([1, 2, 3, 4, 5, 6, 7])
    assert connect(root) is root
    assert root.left.next is root.right
    assert root.right.next is None
    assert root.left.left.next is root.left.right
    assert root.left.right.next is root.right.left
    assert root.right.left.next is root.right.right
    assert root.right.right.next is None


def test_connect_imperfect_tree_raises():
    with pytest.raises(ValueError):
        connect(create_linked_tree([1, 2, None]))
    assert connect(None) is None


def test_max_level_sum_is_best_level():
    root = create_tree([1, 7, 0, 7, -8, None, None])
    levels = level_order(root)
    best = max_level_sum(root)
    assert sum(levels[best - 1]) == max(sum(level) for level in levels)
    assert max_level_sum(create_tree([-100])) == 1


def test_max_level_sum_empty_raises():
    with pytest.raises(ValueError):
        max_level_sum(None)


def test_longest_zigzag():
    root = create_tree([1, 1, 1, None, 1, None, None, 1, 1, None, 1])
    assert longest_zigzag(root) == 4
    assert longest_zigzag(None) == 0
    assert longest_zigzag(create_tree([1])) == 0


def test_good_nodes():
    assert good_nodes(create_tree([3, 1, 4, 3, None, 1, 5])) == 4
    assert good_nodes(create_tree([1])) == 1
    assert good_nodes(None) == 0


def test_lowest_common_ancestor():
    root = create_tree([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
    p = root.left
    assert lowest_common_ancestor(root, p, root.left.right.right) is p
    assert lowest_common_ancestor(root, p, root.right) is root


def test_path_sum():
    root = create_tree([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1])
    assert path_sum(root, 22) == 3
    other = create_tree([10, 5, -3, 3, 2, None, 11, 3, -2, None, 1])
    assert path_sum(other, 8) == 3
    assert path_sum(None, 0) == 0


@pytest.mark.parametrize("key", [2, 3, 4, 5, 6, 7])
def test_delete_node_keeps_bst(key):
    values = [5, 3, 6, 2, 4, None, 7]
    root = delete_node(create_tree(values), key)
    remaining = list(_in_order(root))
    expected = sorted(v for v in values if v is not None and v != key)
    assert remaining == expected
    assert is_valid_bst(root)


def test_delete_leaf_and_missing_key():
    root = delete_node(create_tree([5, 3, 6, 2, 4, None, 7]), 7)
    assert tree_to_list(root) == [5, 3, 6, 2, 4]
    untouched = delete_node(create_tree([5, 3, 6]), 9)
    assert tree_to_list(untouched) == [5, 3, 6]
    assert delete_node(create_tree([0]), 0) is None


@pytest.mark.parametrize("search", [search_bst, search_bst_recursive])
def test_search_bst(search):
    root = create_tree([4, 2, 7, 1, 3])
    assert search(root, 2) is root.left
    assert search(root, 3) is root.left.right
    assert search(root, 5) is None
    assert search(None, 1) is None


def test_leaf_similar():
    first = create_tree([3, 5, 1, 6, 2, 9, 8, None, None, 7, 4])
    second = create_tree(
        [3, 5, 1, 6, 7, 4, 2, None, None, None, None, None, None, 9, 8]
    )
    assert leaf_similar(first, second) is True
    assert leaf_similar(create_tree([1, 2, 3]), create_tree([1, 3, 2])) is False
    assert leaf_similar(create_tree([1, 2]), create_tree([1, 2, 3])) is False