from collections import deque

import pytest

from algokit.graph import GraphNode, build_graph, clone_graph

SQUARE = [[2, 4], [1, 3], [2, 4], [1, 3]]


def _walk(start):
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbor in node.neighbors:
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


def _adjacency(start):
    return {node.val: [n.val for n in node.neighbors] for node in _walk(start)}


def test_build_graph_matches_adjacency():
    graph = build_graph(1, SQUARE)
    assert graph.val == 1
    assert _adjacency(graph) == {k + 1: v for k, v in enumerate(SQUARE)}


def test_build_graph_shares_nodes():
    graph = build_graph(1, SQUARE)
    second = graph.neighbors[0]
    assert second.neighbors[0] is graph


def test_build_graph_rejects_unknown_node():
    with pytest.raises(IndexError):
        build_graph(0, SQUARE)


def test_clone_has_same_shape():
    graph = build_graph(1, SQUARE)
    clone = clone_graph(graph)
    assert _adjacency(clone) == _adjacency(graph)


def test_clone_shares_no_nodes():
    graph = build_graph(1, SQUARE)
    clone = clone_graph(graph)
    assert not (_walk(graph) & _walk(clone))
    assert len(_walk(clone)) == len(SQUARE)


def test_clone_keeps_cycles_inside_clone():
    clone = clone_graph(build_graph(1, SQUARE))
    assert clone.neighbors[0].neighbors[0] is clone


def test_clone_of_lonely_node():
    node = GraphNode(1)
    clone = clone_graph(node)
    assert clone.val == 1
    assert clone.neighbors == []
    assert clone is not node


def test_clone_of_none():
    assert clone_graph(None) is None