"""Undirected graph nodes, building them from adjacency lists and cloning them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(eq=False, repr=False)
class GraphNode:
    """A graph node holding its neighbours, compared by identity."""

    val: int
    neighbors: list[GraphNode] = field(default_factory=list)

    def __repr__(self) -> str:
        labels = [neighbor.val for neighbor in self.neighbors]
        return f"GraphNode(val={self.val!r}, neighbors={labels!r})"


def build_graph(start: int, adjacency: Sequence[Sequence[int]]) -> GraphNode:
    """Build the graph reachable from ``start``; node ``k`` uses ``adjacency[k - 1]``."""
    nodes: dict[int, GraphNode] = {}

    def build(label: int) -> GraphNode:
        if label in nodes:
            return nodes[label]
        if not 1 <= label <= len(adjacency):
            raise IndexError(f"node {label} has no adjacency entry")
        node = GraphNode(label)
        nodes[label] = node
        node.neighbors.extend(build(neighbor) for neighbor in adjacency[label - 1])
        return node

    return build(start)


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Return a deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    clones = {node: GraphNode(node.val)}
    queue = deque([node])
    while queue:
        current = queue.popleft()
        copy = clones[current]
        for neighbor in current.neighbors:
            if neighbor not in clones:
                clones[neighbor] = GraphNode(neighbor.val)
                queue.append(neighbor)
            copy.neighbors.append(clones[neighbor])
    return clones[node]